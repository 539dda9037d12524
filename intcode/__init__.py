from .core import EngineBusy
from .core import EngineHalted
from .core import InputExhausted
from .core import IntcodeError
from .core import InvalidOpcode
from .core import Memory
from .core import ProgramError
from .core import SegmentationFault
from .device import Channel
from .device import Feed
from .interpreter import Engine
from .interpreter import Interpreter
from .interpreter import State
from .interpreter import execute
