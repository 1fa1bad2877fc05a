import re
import string

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)

NUMBER_CHARS = DIGITS | {'-', '.'}
SYMBOL_CHARS = LETTERS | {'-'}
KEYWORD_CHARS = SYMBOL_CHARS | {':'}
SPECIAL_CHARS = SYMBOL_CHARS | {'*'}

INT_DIGITS = 19
INT_PTN = re.compile(r'-?[0-9]+')
FLOAT_PTN = re.compile(r'-?[0-9]+\.[0-9]+')
KEYWORD_PTN = re.compile(r':[A-Za-z][A-Za-z-]*')
SPECIAL_PTN = re.compile(r'\*[A-Za-z][A-Za-z-]*\*')

NIL_WORDS = [
    "nil",
    "NIL",
]
TRUE_WORDS = [
    "t",
]

WHITESPACE = ' '
LIST_OPEN = '('
LIST_CLOSE = ')'
QUOTE = "'"
DQUOTE = '"'
KEYWORD_PREFIX = ':'
SPECIAL_MARK = '*'
MINUS = '-'

DEFAULT_MAX_DEPTH = 256

PROMPT = 'LPRP>> '
QUIT_COMMANDS = [
    "quit",
    "(quit)",
]
