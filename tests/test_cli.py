import io
import logging
import sys

import pytest

from lprp.cli import main


def test_read(capsys):
    main(['read', '(cons 1 2)'])
    captured = capsys.readouterr()
    assert captured.out == "List([Symbol('cons'), Int(1), Int(2)])\n"
    assert captured.err == ''


def test_read_sexp(capsys):
    main(['read', '--sexp', "'(1  2.50 NIL)"])
    assert capsys.readouterr().out == "'(1 2.5 nil)\n"


def test_read_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(['read', '*bad'])
    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.startswith('ERROR: SyntaxError: invalid special symbol')


def test_read_lenient(capsys):
    main(['read', '--lenient', '(1 "a'])
    assert capsys.readouterr().out == "List([Int(1), Str('a')])\n"


def test_read_max_depth(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(['read', '--max-depth', '1', '((1))'])
    assert exc_info.value.code == 1
    assert 'nesting deeper than 1' in capsys.readouterr().err


def test_invalid_max_depth():
    with pytest.raises(SystemExit) as exc_info:
        main(['read', '--max-depth', '0', '1'])
    assert exc_info.value.code == 2


def test_no_subcommand():
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2


def test_repl(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'stdin', io.StringIO('(cons 1 2)\n:key\nquit\n1\n'))
    main(['repl'])
    captured = capsys.readouterr()
    assert captured.out == "LPRP>> List([Symbol('cons'), Int(1), Int(2)])\nLPRP>> Symbol(':key')\nLPRP>> "
    assert captured.err == ''


def test_repl_quit_form(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'stdin', io.StringIO('(quit)\n'))
    main(['repl', '--prompt', '> '])
    assert capsys.readouterr().out == '> '


def test_repl_quit_must_match_whole_line(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'stdin', io.StringIO('quitter\n'))
    main(['repl', '--sexp'])
    assert capsys.readouterr().out == 'LPRP>> quitter\nLPRP>> \n'


def test_repl_error_ends_session(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'stdin', io.StringIO('?\n1\n'))
    with pytest.raises(SystemExit) as exc_info:
        main(['repl'])
    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == 'LPRP>> '
    assert captured.err.startswith('SyntaxError: unexpected character')


def test_repl_recover(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'stdin', io.StringIO('?\n\n1\n'))
    main(['repl', '--recover'])
    captured = capsys.readouterr()
    assert captured.out == 'LPRP>> LPRP>> LPRP>> Int(1)\nLPRP>> \n'
    assert captured.err.count('\n') == 2
    assert 'ReadError' in captured.err


@pytest.fixture()
def fixture_restore_log_levels():
    names = ['lprp'] + [name for name in logging.root.manager.loggerDict if name.startswith('lprp.')]
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


def test_read_long_integer(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(['read', '1' * 5000])
    assert exc_info.value.code == 1
    assert capsys.readouterr().err.startswith('ERROR: ReadNumError: integer out of 64-bit range')


def test_verbose_sets_module_loggers(fixture_restore_log_levels, capsys, caplog):
    main(['-v', 'read', '1'])
    assert logging.getLogger('lprp').level == logging.INFO
    assert logging.getLogger('lprp.reader').level == logging.INFO

    main(['-vv', 'read', '1 2'])
    assert logging.getLogger('lprp.reader').level == logging.DEBUG
    assert 'trailing top-level form(s) discarded' in caplog.text
    assert capsys.readouterr().out == 'Int(1)\nInt(1)\n'
