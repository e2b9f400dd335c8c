from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gop.core.config import Settings
from gop.core.result import Err, Ok, Result
from gop.output.console import ConsoleProtocol
from gop.services.changelog import read_release_info
from gop.services.errors import GopError
from gop.services.metadata import read_project_info
from gop.services.model import ProjectInfo, ReleaseInfo


@dataclass(frozen=True, slots=True)
class RunContext:
    """Everything a run needs, resolved once before any work starts."""

    root: Path
    settings: Settings
    project: ProjectInfo
    release: ReleaseInfo
    package: bool
    publish: bool
    prerelease: bool
    console: ConsoleProtocol

    @property
    def dist_dir(self) -> Path:
        return self.root / self.settings.dist_dir


def build_context(
    *,
    root: Path,
    package: bool,
    publish: bool,
    prerelease: bool,
    console: ConsoleProtocol,
) -> Result[RunContext, GopError]:
    settings = Settings()
    project = read_project_info(root / settings.manifest)
    if isinstance(project, Err):
        return project

    release = read_release_info(root / settings.changelog)
    if isinstance(release, Err):
        return release

    return Ok(
        RunContext(
            root=root,
            settings=settings,
            project=project.value,
            release=release.value,
            package=package,
            publish=publish,
            prerelease=prerelease,
            console=console,
        )
    )
