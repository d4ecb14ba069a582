"""Port for the authentication collaborator."""

from typing import Protocol


class AuthenticationPort(Protocol):
    """Port supplying the signed-in owner."""

    def current_owner_id(self) -> str | None:
        """Return the authenticated owner id, or None when signed out."""


__all__ = ["AuthenticationPort"]
