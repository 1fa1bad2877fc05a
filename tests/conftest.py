from typing import List

import pytest

from lprp import Reader


SAMPLE_TEXTS = [
    '123',
    '-0.12',
    'nil',
    't',
    'with-open',
    ':my-key',
    '*special*',
    '"(Oops!)"',
    '()',
    "'a",
    "''a",
    "'(1 2 3)",
    '(cons -1 (cons 2.0 nil))',
    '((1 -2.3) (*a* :b))',
    '(format t "Hello, world!!" :stream *standard-output*)',
]


@pytest.fixture()
def fixture_sample_texts() -> List[str]:
    yield SAMPLE_TEXTS


@pytest.fixture()
def fixture_lenient_reader():
    def make(string_: str) -> Reader:
        return Reader(string_, strict=False)
    yield make
