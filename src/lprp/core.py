"""Structural primitives over token trees.

A quoted list is looked through, so ``car`` of ``'(1 2)`` is ``1``.
These functions inspect trees only; nothing is evaluated.
"""
from typing import Optional

from .token import List, Nil, Quote, Symbol, Token


def eq(lhs: Token, rhs: Token) -> bool:
    """Whether two tokens are structurally equal."""
    return lhs == rhs


def atom(token: Token) -> bool:
    """Whether a token is an atom, i.e. anything but a non-empty list (a quote is looked through)."""
    if isinstance(token, List):
        return len(token) == 0
    if isinstance(token, Quote):
        return atom(token.inner)
    return True


def car(token: Token) -> Optional[Token]:
    """Return the first item of a list, Nil for the empty list, or None for anything else."""
    if isinstance(token, List):
        return token[0] if len(token) > 0 else Nil()
    if isinstance(token, Quote):
        return car(token.inner)
    return None


def cdr(token: Token) -> Optional[Token]:
    """Return a list of all but the first item, or None if the token is not a list."""
    if isinstance(token, List):
        return List(token.items[1:])
    if isinstance(token, Quote):
        return cdr(token.inner)
    return None


def is_car_sym(token: Token) -> bool:
    """Whether the first item of a list is a symbol."""
    return isinstance(car(token), Symbol)


def get_sym(token: Token) -> Optional[Symbol]:
    """Return the head symbol of a list such as ``(format t "Hello")``."""
    if is_car_sym(token):
        return car(token)
    return None


def get_args(token: Token) -> Optional[List]:
    """Return the items following the head symbol of a list."""
    if is_car_sym(token):
        return cdr(token)
    return None
