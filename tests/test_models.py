import pytest

from quack.models import RepositoryName, Visibility, first_remote_url, is_valid_repo_name


@pytest.mark.parametrize("name", ["my-proj", "A.b_c-1", "x", "..."])
def test_valid_repo_names(name: str) -> None:
    assert is_valid_repo_name(name)
    assert str(RepositoryName(name)) == name


@pytest.mark.parametrize("name", ["", "my proj", "proj/x", "näme", "a!b", "tab\tname"])
def test_invalid_repo_names(name: str) -> None:
    assert not is_valid_repo_name(name)
    with pytest.raises(ValueError):
        RepositoryName(name)


def test_repository_name_is_immutable() -> None:
    name = RepositoryName("proj")
    with pytest.raises(AttributeError):
        name.value = "other"  # type: ignore[misc]


@pytest.mark.parametrize(
    "answer,expected",
    [
        ("", Visibility.PUBLIC),
        ("y", Visibility.PUBLIC),
        ("Y", Visibility.PUBLIC),
        ("public", Visibility.PUBLIC),
        ("n", Visibility.PRIVATE),
        ("No", Visibility.PRIVATE),
        ("private", Visibility.PRIVATE),
        ("maybe", None),
        ("1", None),
    ],
)
def test_visibility_parse(answer: str, expected: Visibility | None) -> None:
    assert Visibility.parse(answer) is expected


def test_visibility_flags() -> None:
    assert Visibility.PUBLIC.flag == "--public"
    assert Visibility.PRIVATE.flag == "--private"


def test_first_remote_url_takes_first_match_in_order() -> None:
    lines = [
        "✓ Created repository octo/proj on GitHub",
        "  https://github.com/octo/proj  ",
        "git@github.com:octo/proj.git",
    ]
    assert first_remote_url(lines) == "https://github.com/octo/proj"


def test_first_remote_url_accepts_ssh_marker() -> None:
    assert first_remote_url(["noise", "git@github.com:octo/proj.git"]) == "git@github.com:octo/proj.git"


def test_first_remote_url_none_when_absent() -> None:
    assert first_remote_url(["Created", "http://insecure.example"]) is None
