"""Process exit codes.

The CLI maps every error kind to one of these codes. Values are part of the
command-line contract and should remain stable.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the gop command.

    - 0: Success (including the "no assets" early exit)
    - 1: User error (missing or malformed project files)
    - 2: Environment error (gox, go or gh not installed)
    - 3: Build error (vendoring or archive assembly failed)
    - 5: I/O error (unreadable directory, failed write)
    - 6: Publish error (release creation, upload or rollback failed)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    BUILD_ERROR = 3
    IO_ERROR = 5
    PUBLISH_ERROR = 6

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
