import math
from abc import abstractmethod
from decimal import Decimal
from typing import Any, Iterable, Iterator, Tuple

from .errors import ConversionError

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


class Token:
    """A base class for all nodes of a syntax tree.

    Tokens are immutable: every attribute is set once in the constructor.
    ``str()`` prints a token back in the reader's grammar and ``repr()`` shows its structure.
    """

    __slots__ = ()

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def _init(self, **attrs) -> None:
        for name, value in attrs.items():
            object.__setattr__(self, name, value)

    @abstractmethod
    def _key(self) -> Tuple:
        raise NotImplementedError

    @abstractmethod
    def __str__(self) -> str:
        raise NotImplementedError

    def __eq__(self, other: Any) -> bool:
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))

    def as_int(self) -> int:
        """Return the value of an Int token."""
        raise ConversionError(f'cannot convert {type(self).__name__} to int')

    def as_float(self) -> float:
        """Return the value of a Float token."""
        raise ConversionError(f'cannot convert {type(self).__name__} to float')

    def as_str(self) -> str:
        """Return the text of a Symbol, or the double-quoted text of a Str.

        The unquoted text of a Str is its ``text`` attribute.
        """
        raise ConversionError(f'cannot convert {type(self).__name__} to str')

    def as_list(self) -> list:
        """Return a copy of the items of a List."""
        raise ConversionError(f'cannot convert {type(self).__name__} to list')


class T(Token):
    """The boolean-true literal ``t``."""

    __slots__ = ()

    def _key(self) -> Tuple:
        return ()

    def __str__(self) -> str:
        return 't'

    def __repr__(self) -> str:
        return 'T()'


class Nil(Token):
    """The empty/false literal ``nil``."""

    __slots__ = ()

    def _key(self) -> Tuple:
        return ()

    def __str__(self) -> str:
        return 'nil'

    def __repr__(self) -> str:
        return 'Nil()'


class Int(Token):
    """A signed 64-bit integer literal."""

    __slots__ = ('value',)

    def __init__(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Int value must be int type, but got '{type(value)}' type")
        if not INT_MIN <= value <= INT_MAX:
            raise ValueError(f'Int value out of 64-bit range: {value}')
        self._init(value=value)

    def _key(self) -> Tuple:
        return (self.value,)

    def as_int(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f'Int({self.value})'


class Float(Token):
    """A floating point literal."""

    __slots__ = ('value',)

    def __init__(self, value: float) -> None:
        if not isinstance(value, float):
            raise TypeError(f"Float value must be float type, but got '{type(value)}' type")
        self._init(value=value)

    def _key(self) -> Tuple:
        return (self.value,)

    def as_float(self) -> float:
        return self.value

    def __str__(self) -> str:
        if not math.isfinite(self.value):
            return repr(self.value)
        # positional notation, so that 1e-07 prints as 0.0000001
        text = format(Decimal(repr(self.value)), 'f')
        if '.' not in text:
            text += '.0'
        return text

    def __repr__(self) -> str:
        return f'Float({self.value!r})'


class Symbol(Token):
    """An identifier.

    Keyword symbols (``:key``) and special symbols (``*special*``) are Symbols too,
    and their text keeps the decorating punctuation.
    """

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"Symbol text must be str type, but got '{type(text)}' type")
        self._init(text=text)

    @property
    def is_keyword(self) -> bool:
        return self.text.startswith(':')

    @property
    def is_special(self) -> bool:
        return len(self.text) > 2 and self.text.startswith('*') and self.text.endswith('*')

    def _key(self) -> Tuple:
        return (self.text,)

    def as_str(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f'Symbol({self.text!r})'


class Str(Token):
    """A string literal. The text is kept verbatim, without the surrounding double quotes."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"Str text must be str type, but got '{type(text)}' type")
        self._init(text=text)

    def _key(self) -> Tuple:
        return (self.text,)

    def as_str(self) -> str:
        return f'"{self.text}"'

    def __str__(self) -> str:
        return f'"{self.text}"'

    def __repr__(self) -> str:
        return f'Str({self.text!r})'


class Quote(Token):
    """A quoted form. Wraps exactly one token."""

    __slots__ = ('inner',)

    def __init__(self, inner: Token) -> None:
        if not isinstance(inner, Token):
            raise TypeError(f"quoted form must be Token type, but got '{type(inner)}' type")
        self._init(inner=inner)

    def _key(self) -> Tuple:
        return (self.inner,)

    def __str__(self) -> str:
        return f"'{self.inner}"

    def __repr__(self) -> str:
        return f'Quote({self.inner!r})'


class List(Token):
    """An ordered, possibly empty, sequence of tokens."""

    __slots__ = ('items',)

    def __init__(self, items: Iterable[Token] = ()) -> None:
        items = tuple(items)
        for item in items:
            if not isinstance(item, Token):
                raise TypeError(f"list item must be Token type, but got '{type(item)}' type")
        self._init(items=items)

    def _key(self) -> Tuple:
        return self.items

    def as_list(self) -> list:
        return list(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, idx: int) -> Token:
        return self.items[idx]

    def __iter__(self) -> Iterator[Token]:
        return iter(self.items)

    def __str__(self) -> str:
        return '(' + ' '.join(str(item) for item in self.items) + ')'

    def __repr__(self) -> str:
        return 'List([' + ', '.join(repr(item) for item in self.items) + '])'
