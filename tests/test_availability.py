import pytest

from quack.availability import ToolAvailabilityChecker
from quack.config import QuackConfig
from quack.errors import CommandLaunchError, ManualActionPending, OperatorDeclinedError, UnsupportedPlatformError
from quack.github_cli import GitHubCli
from tests.fakes import FakeConsole, FakeExecutor, FakeHost, fail, ok

MISSING = CommandLaunchError("gh not found")


def _checker(executor: FakeExecutor, console: FakeConsole, host: FakeHost, config: QuackConfig | None = None):
    return ToolAvailabilityChecker(
        gh=GitHubCli(executor),
        executor=executor,
        console=console,
        host=host,
        config=config or QuackConfig(),
    )


def test_already_installed_short_circuits(host: FakeHost) -> None:
    executor = FakeExecutor({("gh", "--version"): ok("gh version 2.40.0")})
    console = FakeConsole()

    _checker(executor, console, host).ensure_installed()

    assert executor.calls == [("gh", "--version")]
    assert console.prompts == []


def test_operator_declines_install(host: FakeHost) -> None:
    executor = FakeExecutor({("gh", "--version"): MISSING})

    with pytest.raises(OperatorDeclinedError):
        _checker(executor, FakeConsole(["n"]), host).ensure_installed()
    assert executor.calls == [("gh", "--version")]


def test_empty_answer_is_not_consent(host: FakeHost) -> None:
    executor = FakeExecutor({("gh", "--version"): MISSING})
    with pytest.raises(OperatorDeclinedError):
        _checker(executor, FakeConsole([""]), host).ensure_installed()


def test_macos_installs_with_homebrew(host: FakeHost) -> None:
    executor = FakeExecutor({("gh", "--version"): [MISSING, ok("gh version 2.40.0")]})

    _checker(executor, FakeConsole(["yes"]), host).ensure_installed()

    assert executor.interactive_calls == [("brew", "install", "gh")]
    assert executor.called("gh", "--version") == [("gh", "--version")] * 2


def test_unsupported_platform_fails(tmp_path) -> None:
    executor = FakeExecutor({("gh", "--version"): MISSING})
    host = FakeHost(os_name="linux", downloads=tmp_path)

    with pytest.raises(UnsupportedPlatformError):
        _checker(executor, FakeConsole(["y"]), host).ensure_installed()
    assert executor.calls == [("gh", "--version")]


def test_still_missing_after_install_needs_manual_action(tmp_path) -> None:
    executor = FakeExecutor(
        {
            ("gh", "--version"): MISSING,
            ("winget", "install", "--id", "GitHub.cli"): ok(),
        }
    )
    host = FakeHost(os_name="windows", downloads=tmp_path)

    with pytest.raises(ManualActionPending, match="new terminal"):
        _checker(executor, FakeConsole(["y"]), host).ensure_installed()


def test_failing_version_probe_counts_as_missing(host: FakeHost) -> None:
    executor = FakeExecutor({("gh", "--version"): fail("broken install")})
    with pytest.raises(OperatorDeclinedError):
        _checker(executor, FakeConsole(["n"]), host).ensure_installed()
