import os

import cli
from cli import load_action, print_buckets, print_course, print_course_list, resolve_csv_path, run_cli
from hash_table import HashTable
from models import Course


def scripted(*answers):
    """Stand-in for input(): returns the answers in order, then raises EOFError."""
    answers = list(answers)

    def fake_input(prompt=''):
        if not answers:
            raise EOFError
        return answers.pop(0)

    return fake_input


def write_csv(tmp_path, text):
    path = tmp_path / 'catalog.csv'
    path.write_text(text, encoding='utf-8')
    return str(path)


def test_resolve_csv_path(tmp_path, monkeypatch):
    path = write_csv(tmp_path, 'CSCI100,Intro\n')
    assert resolve_csv_path(path) == path
    assert resolve_csv_path(str(tmp_path / 'missing.csv')) is None

    monkeypatch.setattr(cli, 'DATA_DIR', str(tmp_path))
    monkeypatch.chdir(os.path.dirname(os.path.abspath(__file__)))
    assert resolve_csv_path('catalog.csv') == os.path.join(str(tmp_path), 'catalog.csv')


def test_bundled_catalog_is_found():
    assert resolve_csv_path('') == os.path.join(cli.DATA_DIR, cli.DEFAULT_CSV)


def test_load_action_missing_file(tmp_path, capsys):
    table = HashTable()
    assert load_action(table, str(tmp_path / 'missing.csv')) == 0
    assert 'Failed to open file' in capsys.readouterr().out
    assert len(table) == 0


def test_print_course_list_sorted(tmp_path, capsys):
    table = HashTable()
    load_action(table, write_csv(tmp_path, (
        'MATH201,Discrete Mathematics\n'
        'CSCI200,Data Structures,CSCI101\n'
        'CSCI101,Programming\n'
    )))
    capsys.readouterr()

    print_course_list(table)
    assert capsys.readouterr().out.splitlines() == [
        'Number: CSCI101 Name: Programming',
        'Number: CSCI200 Name: Data Structures Prerequisites: CSCI101',
        'Number: MATH201 Name: Discrete Mathematics',
    ]


def test_print_course_list_empty(capsys):
    print_course_list(HashTable())
    assert capsys.readouterr().out.strip() == 'No courses loaded.'


def test_print_course_normalizes_input(capsys):
    table = HashTable()
    table.insert(Course('CSCI101', 'Programming'))

    assert print_course(table, '  csci101 ') is True
    assert capsys.readouterr().out.strip() == 'Number: CSCI101 Name: Programming'

    assert print_course(table, 'zz999') is False
    assert capsys.readouterr().out.strip() == 'Course Number ZZ999 not found.'


def test_print_buckets_shows_chains(capsys):
    table = HashTable(2)
    table.insert(Course('CSCI101', 'Programming'))   # (101 + 67) % 2 == 0
    table.insert(Course('CSCI103', 'Lab'))           # (103 + 67) % 2 == 0
    print_buckets(table, 2)
    out = capsys.readouterr().out
    assert 'Bucket 0: CSCI101 -> CSCI103' in out
    assert 'Bucket 1: (empty)' in out


def test_run_cli_session(tmp_path, capsys):
    path = write_csv(tmp_path, (
        'CSCI200,Data Structures,CSCI101\n'
        'CSCI101,Programming\n'
    ))
    run_cli(scripted('1', path, '2', '3', 'csci200', '3', 'math999', '7', '9'))
    out = capsys.readouterr().out

    assert out.startswith('Welcome to the course planner.')
    assert '2 courses loaded.' in out
    assert out.index('Number: CSCI101 Name: Programming') < out.index('Number: CSCI200 Name: Data Structures')
    assert 'Number: CSCI200 Name: Data Structures Prerequisites: CSCI101' in out
    assert 'Course Number MATH999 not found.' in out
    assert '7 is not a valid option.' in out
    assert out.rstrip().endswith('Good bye.')


def test_run_cli_ends_on_eof(capsys):
    run_cli(scripted('2'))
    out = capsys.readouterr().out
    assert 'No courses loaded.' in out
    assert out.rstrip().endswith('Good bye.')


def test_load_action_rejects_directory(tmp_path, capsys):
    table = HashTable()
    assert load_action(table, str(tmp_path)) == 0
    assert 'Failed to open file' in capsys.readouterr().out
    assert len(table) == 0


def test_resolve_csv_path_skips_directories(tmp_path, monkeypatch):
    (tmp_path / 'catalog.csv').mkdir()
    monkeypatch.setattr(cli, 'DATA_DIR', str(tmp_path))
    monkeypatch.chdir(str(tmp_path))
    assert resolve_csv_path('catalog.csv') is None
    assert resolve_csv_path('.') is None


def test_load_action_reports_os_errors(tmp_path, capsys, monkeypatch):
    path = write_csv(tmp_path, 'CSCI100,Intro\n')

    def denied(table, path):
        raise PermissionError(13, 'Permission denied', path)

    monkeypatch.setattr(cli, 'load_courses_into', denied)
    assert load_action(HashTable(), path) == 0
    assert f'Failed to open file {path}: Permission denied' in capsys.readouterr().out


def test_run_cli_survives_non_utf8_catalog(tmp_path, capsys):
    path = tmp_path / 'latin1.csv'
    path.write_bytes('CSCI100,Café Basics\n'.encode('latin-1'))

    run_cli(scripted('1', str(path), '2', '9'))
    out = capsys.readouterr().out

    assert f'Failed to read file {path}: not UTF-8 text' in out
    assert 'No courses loaded.' in out
    assert out.rstrip().endswith('Good bye.')
