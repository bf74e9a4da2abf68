import io

import pytest

from practicekit.mystring import MyString
from practicekit.rover import Rover, main, parse_digits, run_commands


def run(text):
    out = io.StringIO()
    run_commands(text, out)
    return out.getvalue()


def test_set_and_print():
    assert run("S CH4\nP\n") == "CH4\n"


def test_join_appends():
    assert run("S CH\nJ 4\nP\n") == "CH" + "4" + "\n"


def test_test_leaves_stored_string_unchanged():
    assert run("S CO\nT 2\nP\n") == "CO2\nCO\n"


def test_find_reports_both_outcomes():
    assert run("S H2O\nF 2O\nF N\n") == "2O was found\nN was not found\n"


def test_read_character():
    assert run("S H2O\nR 1\n") == "2\n"


def test_clear_empties():
    assert run("S H2O\nC\nP\n") == "\n"


def test_script_without_trailing_newline():
    assert run("S NaCl\nP") == "NaCl\n"


def test_unknown_command_consumes_next_token():
    assert run("X P\nP\n") == "\n"


def test_read_out_of_range_raises():
    with pytest.raises(IndexError):
        run("S H\nR 5\n")


def test_parse_digits():
    assert parse_digits("12") == 12
    assert parse_digits("a1b2") == 12
    assert parse_digits("") == 0
    assert parse_digits(MyString("7")) == 7


def test_rover_methods():
    rover = Rover("abc")
    assert rover.find("bc")
    assert not rover.find("zz")
    assert rover.read(0) == "a"
    assert str(rover.test("d")) == "abc" + "d"
    assert str(rover.smile) == "abc"


def test_rover_smile_setter_and_clear():
    rover = Rover()
    rover.smile = "xyz"
    assert str(rover.smile) == "xyz"
    rover.clear()
    assert rover.smile.empty()


def test_smile_copy_does_not_alias():
    rover = Rover("ab")
    copy = rover.smile
    copy += "c"
    assert str(rover.smile) == "ab"


def test_print_writes_to_stream():
    out = io.StringIO()
    Rover("O2").print(out)
    assert out.getvalue() == "O2\n"


def test_main_runs_file(tmp_path, capsys):
    path = tmp_path / "commands.txt"
    path.write_text("S CH4\nF H4\nP\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "H4 was found\nCH4\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert capsys.readouterr().out == "Unable to open file\n"