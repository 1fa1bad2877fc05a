from pathlib import Path
__version__ = Path(__file__).parent.joinpath('VERSION').open().read().rstrip()


from .reader import Reader, read, read_all
from .token import Token, T, Nil, Int, Float, Symbol, Quote, Str, List
from .errors import ReaderError, ReaderSyntaxError, DepthLimitError, ReadError, ReadNumError, ConversionError
from .cursor import Cursor
from .core import eq, atom, car, cdr, is_car_sym, get_sym, get_args
