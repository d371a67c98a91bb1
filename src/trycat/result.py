from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Never, NoReturn, TypeGuard, TypeVar, Union, overload

from .errors import UnwrapError

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
D = TypeVar("D")
R = TypeVar("R", bound="ResultBase[Any, Any]")

_UNWRAP_ERR_MESSAGE: str = "Attempted to unwrap an Err value."


def _fail(message: str, payload: object, result: Ok[Any] | Err[Any]) -> NoReturn:
    error: UnwrapError = UnwrapError(message, payload, result)
    if isinstance(result, Err) and isinstance(payload, BaseException):
        raise error from payload
    raise error


class ResultBase(ABC, Generic[T, E]):
    """Operations shared by ``Ok`` and ``Err``.

    Branches that do not apply to the receiver return the receiver itself
    and never call the supplied callbacks.
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> bool:
        """Return ``True`` for ``Ok``."""

    @abstractmethod
    def is_err(self) -> bool:
        """Return ``True`` for ``Err``."""

    @abstractmethod
    def inspect(self, fn: Callable[[T], object]) -> ResultBase[T, E]:
        """Call ``fn`` with the contained value, if any, and return self."""

    @abstractmethod
    def inspect_err(self, fn: Callable[[E], object]) -> ResultBase[T, E]:
        """Call ``fn`` with the contained error, if any, and return self."""

    @abstractmethod
    def map(self, mapper: Callable[[T], U]) -> ResultBase[U, E]:
        """Wrap ``mapper(value)`` in a new ``Ok``; an ``Err`` is returned unchanged."""

    @abstractmethod
    def map_or(self, default: D, mapper: Callable[[T], U]) -> U | D:
        """Return ``mapper(value)``, or ``default`` for an ``Err``."""

    @abstractmethod
    def map_or_else(self, err_mapper: Callable[[E], D], mapper: Callable[[T], U]) -> U | D:
        """Return ``mapper(value)``, or ``err_mapper(error)`` for an ``Err``."""

    @abstractmethod
    def map_err(self, mapper: Callable[[E], F]) -> ResultBase[T, F]:
        """Wrap ``mapper(error)`` in a new ``Err``; an ``Ok`` is returned unchanged."""

    @abstractmethod
    def or_(self, res: R) -> ResultBase[T, E] | R:
        """Return self if ``Ok``, otherwise ``res``."""

    @abstractmethod
    def or_else(self, op: Callable[[E], R]) -> ResultBase[T, E] | R:
        """Return self if ``Ok``, otherwise ``op(error)``."""

    @abstractmethod
    def and_(self, res: R) -> ResultBase[T, E] | R:
        """Return ``res`` if ``Ok``, otherwise self."""

    @abstractmethod
    def and_then(self, op: Callable[[T], R]) -> ResultBase[T, E] | R:
        """Return ``op(value)`` if ``Ok``, otherwise self."""

    @abstractmethod
    def unwrap(self) -> T:
        """Return the contained value.

        Raises:
            UnwrapError: if called on an ``Err``.
        """

    @abstractmethod
    def unwrap_or(self, default: D) -> T | D:
        """Return the contained value, or ``default`` for an ``Err``."""

    @abstractmethod
    def unwrap_or_else(self, op: Callable[[E], D]) -> T | D:
        """Return the contained value, or ``op(error)`` for an ``Err``."""

    @abstractmethod
    def expect(self, message: str) -> T:
        """Return the contained value.

        Raises:
            UnwrapError: with ``message`` verbatim if called on an ``Err``.
        """

    @abstractmethod
    def unwrap_err(self) -> E:
        """Return the contained error.

        Raises:
            UnwrapError: carrying the contained value if called on an ``Ok``.
        """

    @abstractmethod
    def expect_err(self, message: str) -> E:
        """Return the contained error.

        Raises:
            UnwrapError: with ``"{message}: {value}"`` if called on an ``Ok``.
        """


@dataclass(frozen=True, slots=True)
class Ok(ResultBase[T, Never]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def inspect(self, fn: Callable[[T], object]) -> Ok[T]:
        fn(self.value)
        return self

    def inspect_err(self, fn: Callable[[Never], object]) -> Ok[T]:
        return self

    def map(self, mapper: Callable[[T], U]) -> Ok[U]:
        return Ok(mapper(self.value))

    def map_or(self, default: object, mapper: Callable[[T], U]) -> U:
        return mapper(self.value)

    def map_or_else(self, err_mapper: Callable[[Never], object], mapper: Callable[[T], U]) -> U:
        return mapper(self.value)

    def map_err(self, mapper: Callable[[Never], object]) -> Ok[T]:
        return self

    def or_(self, res: ResultBase[Any, Any]) -> Ok[T]:
        return self

    def or_else(self, op: Callable[[Never], ResultBase[Any, Any]]) -> Ok[T]:
        return self

    def and_(self, res: R) -> R:
        return res

    def and_then(self, op: Callable[[T], R]) -> R:
        return op(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: object) -> T:
        return self.value

    def unwrap_or_else(self, op: Callable[[Never], object]) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        _fail(str(self.value), self.value, self)

    def expect_err(self, message: str) -> NoReturn:
        _fail(f"{message}: {self.value}", self.value, self)


@dataclass(frozen=True, slots=True)
class Err(ResultBase[Never, E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def inspect(self, fn: Callable[[Never], object]) -> Err[E]:
        return self

    def inspect_err(self, fn: Callable[[E], object]) -> Err[E]:
        fn(self.error)
        return self

    def map(self, mapper: Callable[[Never], object]) -> Err[E]:
        return self

    def map_or(self, default: D, mapper: Callable[[Never], object]) -> D:
        return default

    def map_or_else(self, err_mapper: Callable[[E], D], mapper: Callable[[Never], object]) -> D:
        return err_mapper(self.error)

    def map_err(self, mapper: Callable[[E], F]) -> Err[F]:
        return Err(mapper(self.error))

    def or_(self, res: R) -> R:
        return res

    def or_else(self, op: Callable[[E], R]) -> R:
        return op(self.error)

    def and_(self, res: ResultBase[Any, Any]) -> Err[E]:
        return self

    def and_then(self, op: Callable[[Never], ResultBase[Any, Any]]) -> Err[E]:
        return self

    def unwrap(self) -> NoReturn:
        _fail(_UNWRAP_ERR_MESSAGE, self.error, self)

    def unwrap_or(self, default: D) -> D:
        return default

    def unwrap_or_else(self, op: Callable[[E], D]) -> D:
        return op(self.error)

    def expect(self, message: str) -> NoReturn:
        _fail(message, self.error, self)

    def unwrap_err(self) -> E:
        return self.error

    def expect_err(self, message: str) -> E:
        return self.error


Result = Union[Ok[T], Err[E]]


@overload
def ok() -> Ok[None]: ...


@overload
def ok(value: T) -> Ok[T]: ...


def ok(value: Any = None) -> Ok[Any]:
    return Ok(value)


@overload
def err() -> Err[None]: ...


@overload
def err(error: E) -> Err[E]: ...


def err(error: Any = None) -> Err[Any]:
    return Err(error)


def is_ok(result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Narrow ``result`` to ``Ok`` for type checkers."""
    return result.is_ok()


def is_err(result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Narrow ``result`` to ``Err`` for type checkers."""
    return result.is_err()
