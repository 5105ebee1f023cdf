"""Result types for the console's remote-call pipeline.

Remote calls never surface ad hoc exceptions to the views. Every call site
turns the outcome into a ``Success`` carrying the payload or a ``Failure``
carrying a classified ``RemoteCallError``, and the caller pattern-matches.

Usage:
    from src.core.result import Failure, Result, Success
    from src.domain.enums import ErrorKind

    result = await pages.list_all()
    match result:
        case Success(value=items):
            render(items)
        case Failure(error=error) if error.kind is ErrorKind.AUTHENTICATION_ERROR:
            redirect_to_login()
        case Failure(error=error):
            notify(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Outcome of a call that produced a value.

    Attributes:
        value: The payload returned by the call.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Outcome of a call that failed.

    Attributes:
        error: The classified error describing the failure.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
