import pytest

from clbuilder.app import App
from clbuilder.app_identity import AppIdentity
from clbuilder.app_version import AppVersion
from clbuilder.hello_world import GreetAction, main


@pytest.mark.parametrize("argv", [["hey", "--name=bob"], ["hey", "--name", "bob"]])
def test_main_succeeds_with_name(argv):
    assert main(argv) == 0


def test_main_without_name(capsys):
    with pytest.raises(SystemExit) as info:
        main(["hey"])
    assert info.value.code == 1
    assert "--name: TooManyOrTooLittleValue" in capsys.readouterr().err


def test_main_name_without_value(capsys):
    with pytest.raises(SystemExit) as info:
        main(["hey", "--name"])
    assert info.value.code == 1
    assert "--name: ValueRequired" in capsys.readouterr().err


def test_main_help(capsys):
    with pytest.raises(SystemExit) as info:
        main(["hey", "-h"])
    assert info.value.code == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "Hello World v0.0.0"
    assert "--name: " in out


def test_main_without_action(capsys):
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 1
    assert "- hey: HEY HEY" in capsys.readouterr().out


def test_main_unknown_action(capsys):
    with pytest.raises(SystemExit) as info:
        main(["bye"])
    assert info.value.code == 1
    assert "1: InvalidValue" in capsys.readouterr().err


def test_greet_action_reads_name():
    app = App(AppIdentity("Hello World", "A Hello World", AppVersion()), argv=["prog", "--name", "bob"])
    GreetAction().run(app)
    assert app.args.first_of("--name") == "bob"
    assert app.args.current_positional() == "prog"