"""Ladder error taxonomy.

Every error here is recoverable: it is raised before any state is touched,
so the ladder is left exactly as it was. The server maps each class to an
HTTP response through ``status_code`` and ``kind``.
"""

from __future__ import annotations

from ..constants import MAX_CHECKOUT


class LadderError(Exception):
    """Base class for user-facing ladder errors."""

    kind = "ladder_error"
    status_code = 400
    default_message = "The request could not be processed."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def as_dict(self) -> dict[str, str]:
        return {"error": self.kind, "message": self.message}


class ValidationError(LadderError):
    """Match submission rejected during validation."""

    kind = "validation_error"
    status_code = 422


class EmptyNameError(ValidationError):
    kind = "empty_name"
    default_message = "Both player names are required."


class DuplicatePlayerError(ValidationError):
    kind = "duplicate_player"
    default_message = "Choose two different players."


class InvalidWinnerError(ValidationError):
    kind = "invalid_winner"
    default_message = "Select who won the match."


class InvalidCheckoutError(ValidationError):
    kind = "invalid_checkout"
    default_message = f"Checkout must be a whole number from 0 to {MAX_CHECKOUT}."


class ResetAuthenticationError(LadderError):
    kind = "reset_denied"
    status_code = 403
    default_message = "Incorrect passphrase. Nothing was reset."


class MalformedStateError(LadderError):
    """Persisted blob could not be parsed.

    Only raised inside the persistence layer, which recovers with an empty
    ladder. Never reaches a user.
    """

    kind = "malformed_state"
    status_code = 500
    default_message = "Stored ladder data is malformed."
