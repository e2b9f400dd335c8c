from __future__ import annotations

from pathlib import Path

import pytest

from gop.core.result import Err, Ok
from gop.services import licenses as licenses_mod
from gop.services.errors import FileIOFailed
from gop.services.licenses import (
    collect_licenses,
    collect_vendor_licenses,
    find_project_license,
    is_excluded,
    is_license,
    vendor_target_name,
)


def _touch(path: Path, text: str = "license text") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "name",
    ["LICENSE", "license", "LICENSE.txt", "License.md", "COPYING", "NOTICE", "notice.rst"],
)
def test_is_license(name: str) -> None:
    assert is_license(name)


@pytest.mark.parametrize("name", ["LICENSES", "license_test.go", "README.md", "COPYING-2", ""])
def test_is_not_license(name: str) -> None:
    assert not is_license(name)


def test_exclusions_match_names_and_extensions() -> None:
    assert is_excluded("examples")
    assert is_excluded("src")
    assert is_excluded("license.go")
    assert not is_excluded("LICENSE")
    assert not is_excluded("golang.org")


def test_vendor_target_name_uses_grandparent_and_parent() -> None:
    assert vendor_target_name(Path("vendor/a/b/LICENSE")) == "a-b-license"
    assert (
        vendor_target_name(Path("vendor/github.com/pkg/errors/LICENSE.txt"))
        == "pkg-errors-license.txt"
    )


def test_missing_vendor_tree_is_empty(tmp_path: Path) -> None:
    assert collect_vendor_licenses(tmp_path / "vendor") == Ok({})


def test_vendor_walk(tmp_path: Path) -> None:
    vendor = tmp_path / "vendor"
    errors = _touch(vendor / "github.com" / "pkg" / "errors" / "LICENSE")
    notice = _touch(vendor / "golang.org" / "x" / "sys" / "NOTICE")
    _touch(vendor / "golang.org" / "x" / "sys" / "README.md")
    _touch(vendor / "github.com" / "pkg" / "errors" / "examples" / "demo" / "LICENSE")
    _touch(vendor / "github.com" / "pkg" / "errors" / "license.go")

    result = collect_vendor_licenses(vendor)

    assert result == Ok({"pkg-errors-license": errors, "x-sys-notice": notice})


def test_vendor_collision_last_visited_wins(tmp_path: Path) -> None:
    vendor = tmp_path / "vendor"
    _touch(vendor / "a" / "owner" / "lib" / "LICENSE")
    later = _touch(vendor / "b" / "owner" / "lib" / "LICENSE")

    result = collect_vendor_licenses(vendor)

    assert isinstance(result, Ok)
    assert result.value == {"owner-lib-license": later}


def test_vendor_walk_is_repeatable(tmp_path: Path) -> None:
    vendor = tmp_path / "vendor"
    for owner in ("zeta", "alpha", "mid"):
        _touch(vendor / "host" / owner / "lib" / "LICENSE")
        _touch(vendor / "host" / owner / "COPYING")

    first = collect_vendor_licenses(vendor)
    second = collect_vendor_licenses(vendor)

    assert isinstance(first, Ok) and isinstance(second, Ok)
    assert sorted(first.value.items()) == sorted(second.value.items())
    assert len(first.value) == 6


def test_find_project_license(tmp_path: Path) -> None:
    _touch(tmp_path / "README.md")
    lic = _touch(tmp_path / "LICENSE")
    (tmp_path / "NOTICE").mkdir()
    assert find_project_license(tmp_path) == Ok(lic)


def test_find_project_license_is_not_recursive(tmp_path: Path) -> None:
    _touch(tmp_path / "docs" / "LICENSE")
    assert find_project_license(tmp_path) == Ok(None)


def test_find_project_license_unreadable_root(tmp_path: Path) -> None:
    result = find_project_license(tmp_path / "missing")
    assert isinstance(result, Err)


def test_collect_licenses_merges_and_sorts(tmp_path: Path) -> None:
    own = _touch(tmp_path / "LICENSE.md")
    dep = _touch(tmp_path / "vendor" / "github.com" / "spf13" / "cobra" / "LICENSE.txt")

    result = collect_licenses(
        vendor_root=tmp_path / "vendor",
        project_root=tmp_path,
        project_name="repo",
    )

    assert isinstance(result, Ok)
    assert result.value.project_license == own
    assert [(f.target_name, f.source_path) for f in result.value.files] == [
        ("repo-license.md", own),
        ("spf13-cobra-license.txt", dep),
    ]


def test_collect_licenses_without_any(tmp_path: Path) -> None:
    result = collect_licenses(
        vendor_root=tmp_path / "vendor",
        project_root=tmp_path,
        project_name="repo",
    )
    assert isinstance(result, Ok)
    assert result.value.files == ()
    assert result.value.project_license is None


def test_unreadable_vendor_directory_is_fatal(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    vendor = tmp_path / "vendor"
    _touch(vendor / "a" / "b" / "LICENSE")
    real_walk = licenses_mod.os.walk

    def failing_walk(top, onerror=None):
        onerror(PermissionError(13, "denied", str(vendor / "x")))
        yield from real_walk(top, onerror=onerror)

    monkeypatch.setattr(licenses_mod.os, "walk", failing_walk)

    result = collect_vendor_licenses(vendor)

    assert result == Err(FileIOFailed(vendor / "x", "denied"))
