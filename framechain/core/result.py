"""Result types for railway-oriented error propagation.

Layers that prefer returning errors over raising them pass a
``ContextualError`` inside a ``Failure``; each layer re-annotates the
failure on the way out with ``chain_result``.

Usage:
    def load(path: str) -> Result[bytes, ContextualError]:
        if not exists(path):
            return fail("file missing", 2)
        return Success(value=read(path))

    result = chain_result(load(path), "loading profile failed")
    match result:
        case Success(value=value):
            print(f"Loaded {len(value)} bytes")
        case Failure(error=error):
            print(error.render_detailed())
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
