from pathlib import Path

import pytest

from treewalk.__main__ import main
from treewalk.ast_json import loads_statement
from treewalk.ast import assign, plus
from treewalk.programs import EXAMPLES as PROGRAMS, factorial_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_default_runs_factorial(capsys):
    main([])
    out = capsys.readouterr().out
    assert out.startswith('{\n    factorial = 1;\n')
    assert out.endswith('factorial: 120\ni: 0\n')


def test_no_print_shows_only_bindings(capsys):
    main(['--no-print', '--example', 'book'])
    assert capsys.readouterr().out == 'z: 7\n'


def test_runs_ast_file(capsys):
    main(['--no-print', '--ast', str(EXAMPLES / 'gcd.ast.json')])
    assert capsys.readouterr().out == 'a: 6\nb: 0\nt: 0\n'


def test_runtime_error_exits_with_partial_bindings(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['--no-print', '--ast', str(EXAMPLES / 'divide_by_zero.ast.json')])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == 'a: 5\n'
    assert 'Runtime error' in captured.err
    assert 'DivisionByZero' in captured.err


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['--ast', str(tmp_path / 'missing.json')])
    assert excinfo.value.code == 1
    assert 'not found' in capsys.readouterr().err


def test_malformed_file(tmp_path, capsys):
    bad = tmp_path / 'bad.json'
    bad.write_text('{"type": "Id", "name": "x"}', encoding='utf-8')
    with pytest.raises(SystemExit):
        main(['--ast', str(bad)])
    assert 'AstFormatError' in capsys.readouterr().err


def test_emit_ast(tmp_path, capsys):
    out_file = tmp_path / 'factorial.json'
    main(['--emit-ast', str(out_file)])
    assert capsys.readouterr().out.strip() == str(out_file)
    assert loads_statement(out_file.read_text(encoding='utf-8')) == factorial_program()


def test_verbose_writes_debug_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main(['-vv', '--no-print'])
    capsys.readouterr()
    debug = (tmp_path / 'debug.txt').read_text(encoding='utf-8')
    assert 'assign factorial = 120' in debug
    assert 'while condition' not in debug


def test_deeply_nested_ast_file_is_reported(tmp_path, capsys):
    depth = 5000
    expr = ('{"type": "Operator", "op": "+", "left": ' * depth
            + '{"type": "Number", "value": 1}'
            + ', "right": {"type": "Number", "value": 1}}' * depth)
    deep = tmp_path / 'deep.json'
    deep.write_text('{"type": "Assign", "target": {"type": "Id", "name": "x"}, "value": ' + expr + '}',
                    encoding='utf-8')
    with pytest.raises(SystemExit) as excinfo:
        main(['--no-print', '--ast', str(deep)])
    assert excinfo.value.code == 1
    assert 'Error' in capsys.readouterr().err


def test_too_deep_program_is_a_runtime_error(monkeypatch, capsys):
    expr = plus(1, 1)
    for _ in range(5000):
        expr = plus(expr, 1)
    program = assign('x', expr)
    monkeypatch.setitem(PROGRAMS, 'factorial', lambda: program)
    with pytest.raises(SystemExit) as excinfo:
        main(['--no-print'])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'Runtime error' in captured.err


def test_emit_ast_into_missing_directory(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['--emit-ast', str(tmp_path / 'missing' / 'out.json')])
    assert excinfo.value.code == 1
    assert capsys.readouterr().err.startswith('Error: cannot write')
