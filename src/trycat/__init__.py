"""trycat: a small Result type with Ok/Err variants and exception adapters."""

from .capture import tryp, trys
from .errors import UnwrapError
from .result import Err, Ok, Result, ResultBase, err, is_err, is_ok, ok

__version__ = "0.2.4"

__all__ = [
    "Err",
    "Ok",
    "Result",
    "ResultBase",
    "UnwrapError",
    "err",
    "is_err",
    "is_ok",
    "ok",
    "tryp",
    "trys",
]
