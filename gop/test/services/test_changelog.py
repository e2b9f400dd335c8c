from __future__ import annotations

from pathlib import Path

from gop.core.result import Err, Ok
from gop.services.changelog import is_heading, parse_changelog_text, read_release_info
from gop.services.errors import ChangelogMalformed, ChangelogMissing
from gop.services.model import ReleaseInfo


def test_top_entry_only() -> None:
    info = parse_changelog_text("# 1.0.0\nfix bug\n# 0.9.0\nold\n")
    assert info == ReleaseInfo(version="1.0.0", notes="fix bug")


def test_notes_keep_lines_in_order_without_trailing_blank() -> None:
    text = "# 2.1.0\n\n- added A\n  - detail\n- fixed B\n\n# 2.0.0\n- older\n"
    info = parse_changelog_text(text)
    assert info is not None
    assert info.notes == "\n- added A\n  - detail\n- fixed B"


def test_single_heading_reads_to_end_of_file() -> None:
    info = parse_changelog_text("# v0.1.0\nfirst\nsecond\n")
    assert info == ReleaseInfo(version="v0.1.0", notes="first\nsecond")


def test_version_is_trimmed() -> None:
    info = parse_changelog_text("#   1.2.3  \nnotes")
    assert info is not None
    assert info.version == "1.2.3"


def test_subheadings_are_notes() -> None:
    info = parse_changelog_text("# 1.0.0\n## Fixed\n- a\n# 0.1.0\n")
    assert info is not None
    assert info.notes == "## Fixed\n- a"


def test_heading_requires_text_after_marker() -> None:
    assert is_heading("# 1.0.0")
    assert not is_heading("# ")
    assert not is_heading("#1.0.0")
    assert not is_heading("## 1.0.0")


def test_no_heading() -> None:
    assert parse_changelog_text("just text\n") is None


def test_read_missing_file(tmp_path: Path) -> None:
    result = read_release_info(tmp_path / "CHANGELOG.md")
    assert result == Err(ChangelogMissing(tmp_path / "CHANGELOG.md"))


def test_read_without_heading(tmp_path: Path) -> None:
    path = tmp_path / "CHANGELOG.md"
    path.write_text("nothing here\n", encoding="utf-8")
    assert read_release_info(path) == Err(ChangelogMalformed(path))


def test_read_file(tmp_path: Path) -> None:
    path = tmp_path / "CHANGELOG.md"
    path.write_text("# 1.0.0\nfix bug\n# 0.9.0\nold\n", encoding="utf-8")
    assert read_release_info(path) == Ok(ReleaseInfo(version="1.0.0", notes="fix bug"))


def test_read_file_with_byte_order_mark(tmp_path: Path) -> None:
    path = tmp_path / "CHANGELOG.md"
    path.write_text("# 1.0.0\nfix bug\n", encoding="utf-8-sig")
    assert read_release_info(path) == Ok(ReleaseInfo(version="1.0.0", notes="fix bug"))
