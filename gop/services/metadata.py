"""Project identity from the Go module manifest."""

from __future__ import annotations

from pathlib import Path

from gop.core.result import Err, Ok, Result
from gop.services.errors import FileIOFailed, ManifestMalformed, ManifestMissing
from gop.services.model import ProjectInfo

_MODULE_MARKER = "module"


def project_name_from_module(module_path: str) -> str:
    return module_path.rstrip("/").split("/")[-1]


def read_project_info(
    manifest: Path,
) -> Result[ProjectInfo, ManifestMissing | ManifestMalformed | FileIOFailed]:
    """Find the ``module <path>`` line in ``manifest``.

    Scanning stops at the first line whose first token is ``module``; the
    token after it is the module path.
    """
    try:
        handle = manifest.open(encoding="utf-8-sig")
    except FileNotFoundError:
        return Err(ManifestMissing(manifest))
    except OSError as e:
        return Err(FileIOFailed(manifest, str(e)))

    with handle:
        try:
            for line in handle:
                fields = line.split()
                if not fields or fields[0] != _MODULE_MARKER:
                    continue
                if len(fields) < 2:
                    break
                module_path = fields[1]
                return Ok(
                    ProjectInfo(
                        module_path=module_path,
                        project_name=project_name_from_module(module_path),
                    )
                )
        except (OSError, UnicodeDecodeError) as e:
            return Err(FileIOFailed(manifest, str(e)))

    return Err(ManifestMalformed(manifest))
