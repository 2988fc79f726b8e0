import pytest

import rpn
import rpn_repl


def lines(*texts):
    """ A stand-in for input() that replays `texts`, then hits end of file. """
    pending = list(texts)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        if not pending:
            raise EOFError()
        return pending.pop(0)
    read_line.prompts = prompts
    return read_line


class TestREPL():
    def test_session(self, capsys):
        m = rpn.Machine()
        read_line = lines('1 2', '+', 'hex', '0xff +')

        assert rpn_repl.rpn_repl(m, read_line) == 0

        out, err = capsys.readouterr()
        assert out.splitlines() == [
            'Type "help" for help, "quit" or an end of file (Ctrl+D) to quit.',
            '= 3',
            '= 0x102',
            '',
        ]
        assert read_line.prompts == ['> ', '> ', '> ', 'hex> ', 'hex> ']

    def test_quit(self, capsys):
        m = rpn.Machine()

        assert rpn_repl.rpn_repl(m, lines('1', 'quit', '2')) == 0

        out, err = capsys.readouterr()
        assert out.splitlines()[-1] == 'Bye.'
        assert m.data_stack == [1]

    def test_errors_keep_going(self, capsys):
        m = rpn.Machine()

        assert rpn_repl.rpn_repl(m, lines('1 +', '2 3 *')) == 0

        out, err = capsys.readouterr()
        assert 'ERROR: this operation requires at least 2 items in the stack' in out
        assert '= 6' in out.splitlines()

    def test_debug_shows_stack(self, capsys):
        m = rpn.Machine()

        rpn_repl.rpn_repl(m, lines('1 2', 'debug'))
        m.settings.toggle_debug()

        out, err = capsys.readouterr()
        assert out.splitlines()[-4:] == [
            '===== Stack =====',
            ' x: 2',
            ' y: 1',
            '',
        ]


class TestMain():
    def test_single_shot(self, capsys):
        assert rpn_repl.main(['1', '2', '+']) == 0

        out, err = capsys.readouterr()
        assert out == '3\n'

    def test_single_shot_not_grouped(self, capsys):
        assert rpn_repl.main(['1000']) == 0

        out, err = capsys.readouterr()
        assert out == '1000\n'

    def test_error(self, capsys):
        assert rpn_repl.main(['1', '+']) == 1

        out, err = capsys.readouterr()
        assert out == ''
        assert err == 'ERROR: this operation requires at least 2 items in the stack\n'

    def test_parse_error(self, capsys):
        assert rpn_repl.main(['1', 'foo']) == 1

        out, err = capsys.readouterr()
        assert err.startswith('ERROR: not a number or operation')

    def test_base(self, capsys):
        assert rpn_repl.main(['--base', '16', '255']) == 0

        out, err = capsys.readouterr()
        assert out == '0xff\n'

    def test_decimals(self, capsys):
        assert rpn_repl.main(['-d', '2', '1', '3', '/']) == 0

        out, err = capsys.readouterr()
        assert out == '0.33\n'

    def test_degrees(self, capsys):
        assert rpn_repl.main(['--degrees', '90', 'sin']) == 0

        out, err = capsys.readouterr()
        assert out == '1\n'

    def test_trap_division(self, capsys):
        assert rpn_repl.main(['1', '0', '/']) == 0
        out, err = capsys.readouterr()
        assert out == 'Infinity\n'

        assert rpn_repl.main(['--trap-division', '1', '0', '/']) == 1
        out, err = capsys.readouterr()
        assert err == "ERROR: /: can't divide by zero\n"

    def test_bad_decimals(self, capsys):
        with pytest.raises(SystemExit) as e:
            rpn_repl.main(['-d', '99', '1'])

        assert e.value.code == 2

    def test_bad_base(self, capsys):
        with pytest.raises(SystemExit):
            rpn_repl.main(['--base', '3', '1'])

    def test_repl_without_expression(self, capsys, monkeypatch):
        monkeypatch.setattr('builtins.input', lines('1 2 +'))

        assert rpn_repl.main([]) == 0

        out, err = capsys.readouterr()
        assert '= 3' in out.splitlines()
