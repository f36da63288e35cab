import pytest

from quack.errors import GitError
from quack.git import RemoteLinker
from quack.models import LinkOutcome
from tests.fakes import FakeConsole, FakeExecutor, fail, ok

URL = "https://github.com/octo/my-proj"


def test_adds_origin_when_absent() -> None:
    executor = FakeExecutor({("git", "remote"): ok("upstream")})

    outcome = RemoteLinker(executor=executor, console=FakeConsole([""])).link(URL)

    assert outcome is LinkOutcome.LINKED
    assert executor.calls == [
        ("git", "init"),
        ("git", "remote"),
        ("git", "remote", "add", "origin", URL),
    ]


def test_replaces_existing_origin() -> None:
    executor = FakeExecutor({("git", "remote"): ok("origin\nupstream")})

    RemoteLinker(executor=executor, console=FakeConsole(["y"])).link(URL)

    assert executor.called("git", "remote", "set-url") == [("git", "remote", "set-url", "origin", URL)]
    assert executor.called("git", "remote", "add") == []


def test_similar_remote_name_is_not_origin() -> None:
    executor = FakeExecutor({("git", "remote"): ok("origin-old")})
    RemoteLinker(executor=executor, console=FakeConsole(["yes"])).link(URL)
    assert executor.called("git", "remote", "add") == [("git", "remote", "add", "origin", URL)]


@pytest.mark.parametrize("answer", ["n", "no", "nope"])
def test_declined_link_has_no_side_effects(answer: str) -> None:
    executor = FakeExecutor()
    outcome = RemoteLinker(executor=executor, console=FakeConsole([answer])).link(URL)
    assert outcome is LinkOutcome.SKIPPED
    assert executor.calls == []


def test_without_consent_prompt() -> None:
    console = FakeConsole()
    executor = FakeExecutor()

    outcome = RemoteLinker(executor=executor, console=console, ask_consent=False).link(URL)

    assert outcome is LinkOutcome.LINKED
    assert console.prompts == []


def test_init_failure_is_fatal() -> None:
    executor = FakeExecutor({("git", "init"): fail("permission denied")})
    with pytest.raises(GitError, match="permission denied"):
        RemoteLinker(executor=executor, console=FakeConsole([""])).link(URL)
    assert executor.calls == [("git", "init")]


def test_remote_listing_failure_is_fatal() -> None:
    executor = FakeExecutor({("git", "remote"): fail("not a git repository")})
    with pytest.raises(GitError, match="Could not set git remote"):
        RemoteLinker(executor=executor, console=FakeConsole([""])).link(URL)


def test_remote_mutation_failure_is_fatal() -> None:
    executor = FakeExecutor({("git", "remote", "add", "origin", URL): fail("error: remote origin already exists.")})
    with pytest.raises(GitError, match="already exists"):
        RemoteLinker(executor=executor, console=FakeConsole([""])).link(URL)
