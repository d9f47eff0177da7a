import os
from types import SimpleNamespace

import pytest

from rawprompt.completion import AbsPathExpander, last_token
from rawprompt.completion.abs_path import is_decodable


@pytest.fixture
def expander() -> AbsPathExpander:
    return AbsPathExpander()


def test_last_token_splits_on_whitespace() -> None:
    assert last_token("ls -la  /tmp/fo") == "/tmp/fo"
    assert last_token("cat /tmp/a ") == "/tmp/a"
    assert last_token("") == ""
    assert last_token("   ") == ""


def test_takes_only_absolute_last_token(expander: AbsPathExpander) -> None:
    assert expander.takes("ls /usr")
    assert expander.takes("/")
    assert not expander.takes("ls usr/lib")
    assert not expander.takes("/usr ls")
    assert not expander.takes("")


def test_single_file_match_resolves_with_trailing_space(tmp_path, expander) -> None:
    (tmp_path / "foo.txt").write_text("x")
    (tmp_path / "bar").mkdir()

    expansion = expander.expand(f"cat {tmp_path}/fo")

    assert expansion.is_resolved()
    assert expansion.entry == "o.txt "
    assert expansion.hints == ["foo.txt "]


def test_single_directory_match_resolves_with_slash(tmp_path, expander) -> None:
    (tmp_path / "food").mkdir()

    expansion = expander.expand(f"cd {tmp_path}/fo")

    assert expansion.is_resolved()
    assert expansion.entry == "od/"
    assert expansion.hints == ["food/"]


def test_several_matches_are_ambiguous(tmp_path, expander) -> None:
    (tmp_path / "foo.txt").write_text("x")
    (tmp_path / "food").mkdir()
    (tmp_path / "other").write_text("x")

    expansion = expander.expand(f"ls {tmp_path}/fo")

    assert not expansion.is_resolved()
    assert sorted(expansion.hints) == ["foo.txt ", "food/"]
    # The entry comes from whichever candidate was listed first
    assert expansion.entry in {"o.txt ", "od/"}
    assert expansion.hints[0].startswith("fo" + expansion.entry.rstrip("/ "))


def test_matching_is_case_sensitive(tmp_path, expander) -> None:
    (tmp_path / "Foo").write_text("x")

    expansion = expander.expand(f"{tmp_path}/fo")

    assert expansion.hints == []
    assert expansion.entry == ""


def test_existing_directory_with_separator_lists_children(tmp_path, expander) -> None:
    (tmp_path / "a.txt").write_text("x")

    expansion = expander.expand(f"{tmp_path}/")

    assert expansion.entry == "a.txt "
    assert expansion.hints == ["a.txt "]


def test_existing_directory_without_separator_inserts_it(tmp_path, expander) -> None:
    (tmp_path / "a.txt").write_text("x")

    expansion = expander.expand(str(tmp_path))

    assert expansion.entry == os.sep + "a.txt "
    assert expansion.hints == ["a.txt "]


def test_existing_file_yields_empty_expansion(tmp_path, expander) -> None:
    (tmp_path / "foo.txt").write_text("x")

    expansion = expander.expand(f"{tmp_path}/foo.txt")

    assert expansion.entry == ""
    assert expansion.hints == []


def test_missing_parent_yields_empty_expansion(tmp_path, expander) -> None:
    expansion = expander.expand(f"{tmp_path}/missing/fo")

    assert expansion.entry == ""
    assert expansion.hints == []


def test_unclassifiable_entry_gets_no_marker(tmp_path, expander) -> None:
    os.symlink(tmp_path / "nowhere", tmp_path / "link")

    expansion = expander.expand(f"{tmp_path}/li")

    assert expansion.hints == ["link"]
    assert expansion.entry == "nk"
    assert expansion.is_resolved()


def test_candidates_are_classified_independently(tmp_path, expander) -> None:
    for name in ["dir_a", "dir_b", "dir_c"]:
        (tmp_path / name).mkdir()

    expansion = expander.expand(f"{tmp_path}/dir")

    assert sorted(expansion.hints) == ["dir_a/", "dir_b/", "dir_c/"]


def test_listing_failure_propagates(tmp_path, expander, monkeypatch) -> None:
    (tmp_path / "foo.txt").write_text("x")

    def denied(path):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr("rawprompt.completion.abs_path.os.scandir", denied)

    with pytest.raises(PermissionError):
        expander.expand(f"{tmp_path}/fo")


class FakeScandir:
    """Stands in for ``os.scandir`` with a fixed listing."""

    def __init__(self, names: list[str]):
        self._names = names

    def __call__(self, path):
        return self

    def __enter__(self):
        return iter([SimpleNamespace(name=name) for name in self._names])

    def __exit__(self, *exc_info):
        return False


def test_entry_comes_from_first_recorded_candidate(tmp_path, expander, monkeypatch) -> None:
    (tmp_path / "a.txt").write_text("x")
    monkeypatch.setattr("rawprompt.completion.abs_path.os.scandir", FakeScandir(["", "a.txt"]))

    expansion = expander.expand(f"{tmp_path}/")

    assert expansion.hints == ["a.txt "]
    assert expansion.entry == "a.txt "
    assert expansion.is_resolved()


def test_undecodable_names_are_skipped(tmp_path, expander, monkeypatch) -> None:
    (tmp_path / "cafe.txt").write_text("x")
    monkeypatch.setattr(
        "rawprompt.completion.abs_path.os.scandir", FakeScandir(["caf\udce9", "cafe.txt"])
    )

    expansion = expander.expand(f"cat {tmp_path}/ca")

    assert expansion.hints == ["cafe.txt "]
    assert expansion.entry == "fe.txt "


def test_is_decodable() -> None:
    assert is_decodable("café")
    assert not is_decodable("caf\udce9")
