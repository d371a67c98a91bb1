from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .result import Err, Ok


class UnwrapError(Exception):
    """Raised when a result is unwrapped through the accessor of the other variant.

    ``payload`` holds the value or error carried by ``result``.
    """

    payload: object
    result: Ok[object] | Err[object]

    def __init__(self, message: str, payload: object, result: Ok[object] | Err[object]) -> None:
        super().__init__(message)
        self.payload = payload
        self.result = result
