"""
Redemption failures.

Terminal errors (not found, expired) mean the id is gone and the caller
must request a new confirmation. Recoverable errors (wrong action,
parameter mismatch) leave the record in place so the same id can be
retried with corrected arguments until it expires.
"""

from __future__ import annotations


class ConfirmationError(Exception):
  retryable = False


class ConfirmationNotFound(ConfirmationError):
  def __init__(self, confirmation_id: str) -> None:
    self.confirmation_id = confirmation_id
    super().__init__("Invalid or expired confirmation ID. Please start a new request.")


class ConfirmationExpired(ConfirmationError):
  def __init__(self, confirmation_id: str) -> None:
    self.confirmation_id = confirmation_id
    super().__init__("Confirmation ID has expired. Please start a new request.")


class WrongAction(ConfirmationError):
  retryable = True

  def __init__(self, confirmation_id: str, issued_for: str, requested: str) -> None:
    self.confirmation_id = confirmation_id
    self.issued_for = issued_for
    self.requested = requested
    super().__init__(
      f"Confirmation ID was issued for a different action ({issued_for}), not {requested}."
    )


class ParameterMismatch(ConfirmationError):
  retryable = True

  def __init__(self, confirmation_id: str, key: str) -> None:
    self.confirmation_id = confirmation_id
    self.key = key
    super().__init__(
      "Request parameters do not match the original confirmation. "
      f'Parameter "{key}" differs. Retry with the original parameters before the ID expires.'
    )
