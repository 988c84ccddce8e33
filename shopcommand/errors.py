"""Error types raised by the command service."""

from __future__ import annotations


class CommandError(Exception):
    """Base class for every error the command service raises."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.message == other.message  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class CRUDError(CommandError):
    """A database operation could not be carried out (duplicates, missing rows)."""


class DomainError(CommandError):
    """A domain rule was violated."""


class InternalError(CommandError):
    """An internal failure, such as a lost database connection."""