"""Project layout constants.

Names are fixed for a conventional Go project checkout; ``Settings`` groups
them so services receive them explicitly rather than reading globals.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "Settings",
    "DIST_DIR",
    "BIN_DIR",
    "VENDOR_DIR",
    "CHANGELOG_NAME",
    "MANIFEST_NAME",
    "LICENSE_DIR",
    "README_NAME",
    "PROTOCOL",
    "DEFAULT_REMOTE",
    "WALK_EXCLUDES",
]

# Output layout
DIST_DIR = "dist"
BIN_DIR = "bin"

# Inputs
VENDOR_DIR = "vendor"
CHANGELOG_NAME = "CHANGELOG.md"
MANIFEST_NAME = "go.mod"

# Archive layout
LICENSE_DIR = "licenses-and-notices"
README_NAME = "readme.txt"

# Module paths are hosted over https
PROTOCOL = "https://"

DEFAULT_REMOTE = "origin"

# Names and extensions skipped while walking the vendor tree
WALK_EXCLUDES: frozenset[str] = frozenset({"examples", "assets", "dist", "bin", "src", ".go"})


@dataclass(frozen=True, slots=True)
class Settings:
    """File and directory names, relative to the project root."""

    dist_dir: str = DIST_DIR
    bin_dir: str = BIN_DIR
    vendor_dir: str = VENDOR_DIR
    changelog: str = CHANGELOG_NAME
    manifest: str = MANIFEST_NAME
    remote: str = DEFAULT_REMOTE
