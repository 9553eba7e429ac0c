"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO
"""

from typing import Protocol, Sequence

from honc_api.core.domain_types import UserId


class UserLike(Protocol):
    """Structural contract for User rows returned by a repository.

    Lets route handlers serialize rows without coupling to the ORM model.
    """
    id: int
    name: str
    email: str


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def list_all(self) -> Sequence[UserLike]: ...
    async def get_by_id(self, user_id: UserId) -> UserLike | None: ...
    async def create(self, name: str, email: str) -> UserLike: ...
