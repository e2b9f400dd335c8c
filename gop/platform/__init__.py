"""Platform abstraction layer."""

from .files import list_files, recreate_dir, write_temp_text
from .process import ProcessError, run, run_streamed

__all__ = [
    # files
    "list_files",
    "recreate_dir",
    "write_temp_text",
    # process
    "ProcessError",
    "run",
    "run_streamed",
]
