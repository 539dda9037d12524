#!/usr/bin/env python

import setuptools


setuptools.setup(
        name='intcode',
        version='0.1',
        license='MIT',
        description='A small stored-program integer virtual machine',
        packages=['intcode'],
        scripts=['bin/icrun.py', 'bin/icamp.py'],
        python_requires='>=3.10',
        extras_require={
            'test': ['pytest'],
            },
        platforms=['Unix'],
        classifiers=[
            'Development Status :: 4 - Beta',
            'Environment :: Console',
            'Intended Audience :: Developers',
            'License :: OSI Approved :: MIT License',
            'Operating System :: Unix',
            'Programming Language :: Python',
            'Programming Language :: Python :: 3',
            'Topic :: Software Development :: Interpreters',
            ]
        )
