"""External Go tooling: gox for cross-compiling, ``go mod vendor`` for licenses."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from gop.core.result import Err, Ok, Result
from gop.output.console import ConsoleProtocol
from gop.platform.process import run as run_process
from gop.platform.process import run_streamed
from gop.services.errors import ToolMissing, VendorFailed

GOX_INSTALL_HINT = "Install gox before packaging: go install github.com/mitchellh/gox@latest"
GO_INSTALL_HINT = "Install Go: https://go.dev/doc/install"

# {{.Dir}} is the source folder name, which gox uses as the binary name.
OUTPUT_TEMPLATE = "{{.Dir}}-{{.OS}}-{{.Arch}}"


def exe_name(name: str) -> str:
    return f"{name}.exe" if os.name == "nt" else name


def go_path(cwd: Path) -> Path:
    """Resolve GOPATH the way the go command does."""
    env = os.environ.get("GOPATH", "")
    first = env.split(os.pathsep)[0].strip()
    if first:
        return Path(first)

    if shutil.which("go") is not None:
        out = run_process(["go", "env", "GOPATH"], cwd=cwd)
        if isinstance(out, Ok) and out.value.strip():
            return Path(out.value.strip().split(os.pathsep)[0])

    return Path.home() / "go"


def find_gox(cwd: Path) -> Result[Path, ToolMissing]:
    """gox must be installed in ``<GOPATH>/bin``."""
    gox = go_path(cwd) / "bin" / exe_name("gox")
    if not gox.is_file():
        return Err(ToolMissing(tool="gox", hint=GOX_INSTALL_HINT))
    return Ok(gox)


def cross_compile(gox: Path, *, bin_dir: Path, cwd: Path, console: ConsoleProtocol) -> bool:
    """Build every gox target into ``bin_dir``.

    A failing target does not stop packaging: gox still leaves the binaries
    it managed to build, so failure is only reported. Returns True if gox
    succeeded for every target.
    """
    output = f"-output={bin_dir / OUTPUT_TEMPLATE}"
    result = run_streamed([str(gox), output], cwd=cwd)
    if isinstance(result, Err):
        console.warning(f"gox reported errors ({result.error}); packaging what was built")
        return False
    return True


def vendor_dependencies(cwd: Path) -> Result[None, ToolMissing | VendorFailed]:
    """Materialize dependency sources under ``vendor/`` so licenses can be collected."""
    if shutil.which("go") is None:
        return Err(ToolMissing(tool="go", hint=GO_INSTALL_HINT))

    result = run_process(["go", "mod", "vendor"], cwd=cwd)
    if isinstance(result, Err):
        return Err(VendorFailed(result.error.detail))
    return Ok(None)
