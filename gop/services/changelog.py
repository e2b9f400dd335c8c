"""Release version and notes from the top of CHANGELOG.md.

The changelog lists releases newest first, each under a ``# <version>``
heading. Only the first entry is read:

    # 1.2.0
    - fixed a bug        <- notes
    # 1.1.0              <- parsing stops here
    - older entry
"""

from __future__ import annotations

from pathlib import Path

from gop.core.result import Err, Ok, Result
from gop.services.errors import ChangelogMalformed, ChangelogMissing, FileIOFailed
from gop.services.model import ReleaseInfo

_HEADING = "# "


def is_heading(line: str) -> bool:
    return len(line) > len(_HEADING) and line.startswith(_HEADING)


def parse_changelog_text(text: str) -> ReleaseInfo | None:
    """Extract the topmost entry, or None when there is no heading."""
    version: str | None = None
    notes: list[str] = []
    for line in text.splitlines():
        if is_heading(line):
            if version is not None:
                break
            version = line[len(_HEADING) :].strip()
            continue
        if version is not None:
            notes.append(line)

    if version is None:
        return None
    return ReleaseInfo(version=version, notes="\n".join(notes).rstrip("\n"))


def read_release_info(
    changelog: Path,
) -> Result[ReleaseInfo, ChangelogMissing | ChangelogMalformed | FileIOFailed]:
    try:
        text = changelog.read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        return Err(ChangelogMissing(changelog))
    except (OSError, UnicodeDecodeError) as e:
        return Err(FileIOFailed(changelog, str(e)))

    info = parse_changelog_text(text)
    if info is None:
        return Err(ChangelogMalformed(changelog))
    return Ok(info)
