import logging
import math
from contextlib import contextmanager
from typing import Iterator, Optional, Type

from .constants import (
    DEFAULT_MAX_DEPTH, DIGITS, DQUOTE, FLOAT_PTN, INT_DIGITS, INT_PTN, KEYWORD_CHARS, KEYWORD_PREFIX, KEYWORD_PTN,
    LETTERS, LIST_CLOSE, LIST_OPEN, MINUS, NIL_WORDS, NUMBER_CHARS, QUOTE, SPECIAL_CHARS, SPECIAL_MARK, SPECIAL_PTN,
    SYMBOL_CHARS, TRUE_WORDS, WHITESPACE,
)
from .cursor import Cursor
from .errors import DepthLimitError, ReadError, ReaderError, ReaderSyntaxError, ReadNumError
from .token import INT_MAX, INT_MIN, Float, Int, List, Nil, Quote, Str, Symbol, T, Token

logger = logging.getLogger(__name__)
logger.setLevel(logging.WARNING)


class Reader:
    """A recursive-descent reader that turns S-expression text into a tree of tokens.

    A reader holds the state of a single pass over its input; create a new one for each text.

    Args:
        string_ (str): Input text.
        max_depth (int): The maximum nesting depth of lists and quotes. (default: 256)
        strict (bool): Whether an unterminated string or list is an error.
            If False, the text read so far is accepted and a warning is logged. (default: True)

    Attributes:
        cursor (Cursor): Lookahead over the input text.
        max_depth (int): The maximum nesting depth of lists and quotes.
        strict (bool): Whether an unterminated string or list is an error.
    """

    def __init__(self,
                 string_: str,
                 max_depth: int = DEFAULT_MAX_DEPTH,
                 strict: bool = True,
                 ) -> None:
        if isinstance(max_depth, bool) or not isinstance(max_depth, int):
            raise TypeError(f"max_depth must be int type, but got '{type(max_depth)}' type")
        if max_depth < 1:
            raise ValueError(f'max_depth must be >= 1, but got {max_depth}')
        self.cursor: Cursor = Cursor(string_)
        self.max_depth: int = max_depth
        self.strict: bool = strict
        self._depth: int = 0

    def _error(self, cls: Type[ReaderError], message: str, pos: Optional[int] = None) -> ReaderError:
        if pos is None:
            pos = self.cursor.pos
        row, col = self.cursor.location(pos)
        return cls(f'{message} at position {pos} (row: {row}, col: {col})', pos)

    @contextmanager
    def _nested(self, start: int) -> Iterator[None]:
        self._depth += 1
        try:
            if self._depth > self.max_depth:
                raise self._error(DepthLimitError, f'nesting deeper than {self.max_depth}', start)
            yield
        finally:
            self._depth -= 1

    def _consume(self, chars: frozenset) -> str:
        """Consume the longest run of characters in ``chars``."""
        buff = ''
        while self.cursor.peek() is not None and self.cursor.peek() in chars:
            buff += self.cursor.advance()
        return buff

    def read_form(self) -> Token:
        """Read exactly one form starting at the current character."""
        char = self.cursor.peek()
        if char is None:
            raise self._error(ReaderSyntaxError, 'unexpected end of input')
        if char == LIST_OPEN:
            return self.read_list()
        elif char in DIGITS or char == MINUS:
            return self.read_number()
        elif char in LETTERS:
            return self.read_symbol()
        elif char == SPECIAL_MARK:
            return self.read_special()
        elif char == KEYWORD_PREFIX:
            return self.read_keyword()
        elif char == DQUOTE:
            return self.read_string()
        elif char == QUOTE:
            return self.read_quote()
        raise self._error(ReaderSyntaxError, f'unexpected character {char!r}')

    def read_number(self) -> Token:
        start = self.cursor.pos
        buff = self._consume(NUMBER_CHARS)
        if INT_PTN.fullmatch(buff):
            # int() refuses very long digit strings, so check the length first
            if len(buff.lstrip(MINUS).lstrip('0')) > INT_DIGITS:
                raise self._error(ReadNumError, f'integer out of 64-bit range: {buff[:32]}...', start)
            value = int(buff)
            if not INT_MIN <= value <= INT_MAX:
                raise self._error(ReadNumError, f'integer out of 64-bit range: {buff}', start)
            return Int(value)
        elif FLOAT_PTN.fullmatch(buff):
            value = float(buff)
            if math.isinf(value):
                raise self._error(ReadNumError, 'float out of 64-bit range', start)
            return Float(value)
        raise self._error(ReadNumError, f'invalid number: {buff!r}', start)

    def read_symbol(self) -> Token:
        buff = self._consume(SYMBOL_CHARS)
        if buff in NIL_WORDS:
            return Nil()
        elif buff in TRUE_WORDS:
            return T()
        return Symbol(buff)

    def read_keyword(self) -> Token:
        start = self.cursor.pos
        buff = self._consume(KEYWORD_CHARS)
        if not KEYWORD_PTN.fullmatch(buff):
            raise self._error(ReaderSyntaxError, f'invalid keyword symbol: {buff!r}', start)
        return Symbol(buff)

    def read_special(self) -> Token:
        start = self.cursor.pos
        buff = self._consume(SPECIAL_CHARS)
        if not SPECIAL_PTN.fullmatch(buff):
            raise self._error(ReaderSyntaxError, f'invalid special symbol: {buff!r}', start)
        return Symbol(buff)

    def read_string(self) -> Token:
        """Read a string literal. Characters are taken verbatim; there are no escape sequences."""
        start = self.cursor.pos
        self.cursor.advance()
        buff = ''
        while True:
            char = self.cursor.advance()
            if char == DQUOTE:
                return Str(buff)
            if char is None:
                if self.strict:
                    raise self._error(ReaderSyntaxError, 'unterminated string', start)
                logger.warning(f'unterminated string starting at position {start} is accepted')
                return Str(buff)
            buff += char

    def read_list(self) -> Token:
        start = self.cursor.pos
        self.cursor.advance()
        items = []
        with self._nested(start):
            while True:
                char = self.cursor.peek()
                if char == LIST_CLOSE:
                    self.cursor.advance()
                    return List(items)
                elif char is None:
                    if self.strict:
                        raise self._error(ReaderSyntaxError, 'unterminated list', start)
                    logger.warning(f'unterminated list starting at position {start} is accepted')
                    return List(items)
                elif char == WHITESPACE:
                    self.cursor.advance()
                else:
                    items.append(self.read_form())

    def read_quote(self) -> Token:
        start = self.cursor.pos
        self.cursor.advance()
        char = self.cursor.peek()
        if char is None or char in (WHITESPACE, LIST_CLOSE):
            raise self._error(ReaderSyntaxError, 'quote is not followed by a form', start)
        with self._nested(start):
            return Quote(self.read_form())

    def read_all(self) -> List:
        """Read every top-level form up to the end of input."""
        forms = []
        try:
            while True:
                char = self.cursor.peek()
                if char is None:
                    return List(forms)
                elif char == WHITESPACE:
                    self.cursor.advance()
                elif char == LIST_CLOSE:
                    raise self._error(ReaderSyntaxError, f'unexpected {LIST_CLOSE!r}')
                else:
                    forms.append(self.read_form())
        except RecursionError as e:
            raise self._error(DepthLimitError, 'nesting exceeds the interpreter recursion limit') from e

    def read(self) -> Token:
        """Read the whole input and return its first top-level form."""
        forms = self.read_all()
        if len(forms) == 0:
            raise self._error(ReadError, 'no form found')
        if len(forms) > 1:
            logger.debug(f'{len(forms) - 1} trailing top-level form(s) discarded')
        return forms[0]


def read(string_: str, max_depth: int = DEFAULT_MAX_DEPTH, strict: bool = True) -> Token:
    """Read the first form of the given text.

    Every form in the text is read, so an error anywhere fails the call,
    but only the first one is returned.

    Args:
        string_ (str): Input text.
        max_depth (int): The maximum nesting depth of lists and quotes. (default: 256)
        strict (bool): Whether an unterminated string or list is an error. (default: True)

    Returns:
        Token: The first top-level form.

    Raises:
        ReaderSyntaxError: The text is malformed, or nested deeper than ``max_depth`` (DepthLimitError).
        ReadNumError: A numeric literal is invalid.
        ReadError: The text contains no form.
    """
    return Reader(string_, max_depth=max_depth, strict=strict).read()


def read_all(string_: str, max_depth: int = DEFAULT_MAX_DEPTH, strict: bool = True) -> List:
    """Read every top-level form of the given text into a List."""
    return Reader(string_, max_depth=max_depth, strict=strict).read_all()
