from __future__ import annotations

from pathlib import Path

import typer

from gop.cli.context import RunContext, build_context
from gop.core.result import Err, Ok, Result
from gop.output.console import ConsoleProtocol, RichConsole
from gop.output.errors import error_exit_code, print_error
from gop.services.errors import GopError
from gop.services.packaging import package
from gop.services.release import publish_release

app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def make_console() -> ConsoleProtocol:
    return RichConsole()


def execute(ctx: RunContext) -> Result[None, GopError]:
    """Package and/or release, in that order."""
    ctx.console.print(f"{ctx.project.project_name} {ctx.release.version}")

    if ctx.package:
        packaged = package(
            root=ctx.root,
            settings=ctx.settings,
            project=ctx.project,
            console=ctx.console,
        )
        if isinstance(packaged, Err):
            return packaged
        report = packaged.value
        if not report.all_targets_built:
            ctx.console.warning("some targets failed to build; their archives are missing")
        ctx.console.success(f"{len(report.archives)} archives in {ctx.settings.dist_dir}/")

    if ctx.publish:
        published = publish_release(
            root=ctx.root,
            release=ctx.release,
            dist_dir=ctx.dist_dir if ctx.package else None,
            prerelease=ctx.prerelease,
            remote=ctx.settings.remote,
            console=ctx.console,
        )
        if isinstance(published, Err):
            return published
        outcome = published.value
        ctx.console.success(f"Released {outcome.version} with {len(outcome.assets)} assets")

    return Ok(None)


@app.command()
def main(
    pack: bool = typer.Option(False, "-p", help="Package binaries into dist/."),
    release: bool = typer.Option(False, "-r", help="Release to GitHub."),
    pre: bool = typer.Option(False, "--pre", help="Mark the release as pre-release."),
) -> None:
    """Package and release a Go project from its go.mod and CHANGELOG.md."""
    console = make_console()
    ctx = build_context(
        root=Path.cwd(),
        package=pack,
        publish=release,
        prerelease=pre,
        console=console,
    )
    if isinstance(ctx, Ok):
        outcome = execute(ctx.value)
    else:
        outcome = ctx

    if isinstance(outcome, Err):
        print_error(outcome.error, console)
        raise typer.Exit(code=error_exit_code(outcome.error))


def run() -> None:
    app()
