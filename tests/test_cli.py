import pytest

from pescatocha.cli import main


def test_main_prints_greeting(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Man, I love Stacks\n"


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2