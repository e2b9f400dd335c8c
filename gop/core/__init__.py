"""Core types: results, exit codes, layout constants."""

from .config import Settings
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "Settings",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
