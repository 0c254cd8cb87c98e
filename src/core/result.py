"""Success/failure values for remote calls whose failure is an expected outcome.

Detection and the browse directory-then-file fallback treat a failed remote
call as a signal, not an exception. `attempt` turns an awaitable into an
`Ok` or `Err` so those call sites can branch with ordinary conditionals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Generic, TypeVar, Union

from core.errors import DocsExplorerError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err:
    error: DocsExplorerError


Result = Union[Ok[T], Err]


async def attempt(awaitable: Awaitable[T]) -> Result[T]:
    """Await and capture a DocsExplorerError as `Err`; other exceptions propagate."""
    try:
        return Ok(await awaitable)
    except DocsExplorerError as e:
        return Err(e)
