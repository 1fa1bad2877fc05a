from typing import Optional


class ReaderError(Exception):
    """A base class for all errors raised by lprp.

    Args:
        message (str): A human readable message.
        pos (int, optional): Offset of the character at which reading failed.

    Attributes:
        pos (int, optional): Offset of the character at which reading failed.
    """

    description = 'ReaderError'

    def __init__(self, message: str = '', pos: Optional[int] = None) -> None:
        super().__init__(message or self.description)
        self.pos: Optional[int] = pos


class ReaderSyntaxError(ReaderError):
    """Malformed keyword or special symbol, unexpected character, missing quote target, stray or missing delimiter."""
    description = 'SyntaxError'


class DepthLimitError(ReaderSyntaxError):
    """Lists and quotes are nested deeper than the reader allows."""


class ReadError(ReaderError):
    """The input contains no form."""
    description = 'ReadError'


class ReadNumError(ReaderError):
    """A numeric literal matches neither the integer nor the float grammar."""
    description = 'ReadNumError'


class ConversionError(ReaderError):
    """A token was converted to a type its variant does not support."""
    description = 'ConversionError: Not support its type.'
