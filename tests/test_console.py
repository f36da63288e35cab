from pathlib import Path

import pytest

from quack import host as host_mod
from quack.console import TerminalConsole, confirm
from quack.host import LocalHost
from tests.fakes import FakeConsole


def test_terminal_console_trims_answers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt: "  my-proj \n")
    assert TerminalConsole().ask("New repo name?: ") == "my-proj"


def test_terminal_console_echo(capsys: pytest.CaptureFixture[str]) -> None:
    TerminalConsole().echo("hello")
    assert capsys.readouterr().out == "hello\n"


@pytest.mark.parametrize(
    "answer,default,expected",
    [("", True, True), ("", False, False), ("Y", False, True), ("yes", True, True), ("n", True, False), ("x", True, False)],
)
def test_confirm(answer: str, default: bool, expected: bool) -> None:
    assert confirm(FakeConsole([answer]), "Q? ", default=default) is expected


def test_download_dir_comes_from_platformdirs(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(host_mod.platformdirs, "user_downloads_path", lambda: tmp_path / "Moved Downloads")
    assert LocalHost().download_dir() == tmp_path / "Moved Downloads"


def test_unsetenv_hides_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QUACK_TEST_TOKEN", "x")
    local = LocalHost()
    assert local.getenv("QUACK_TEST_TOKEN") == "x"
    local.unsetenv("QUACK_TEST_TOKEN")
    assert local.getenv("QUACK_TEST_TOKEN") is None
