"""Failure outcomes of account lifecycle operations.

Each error carries the HTTP status the ``/user`` blueprint answers with and
a short message that is safe to show to the client.
"""


class AccountError(Exception):
    """Base class for account lifecycle failures."""

    status_code = 500
    default_message = 'An error occurred.'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AccountError):
    """Missing or malformed input."""

    status_code = 400
    default_message = 'All fields are required.'


class ConflictError(AccountError):
    """An account already exists for the email."""

    status_code = 400
    default_message = 'Email already registered.'


class AuthError(AccountError):
    """Unknown email or wrong password; the two are not distinguished."""

    status_code = 401
    default_message = 'Invalid email or password'


class ForbiddenError(AccountError):
    status_code = 403
    default_message = 'Please verify your email first.'


class NotFoundError(AccountError):
    status_code = 404
    default_message = 'Account not found.'


class InvalidOTPError(AccountError):
    """Wrong, superseded, consumed or expired one-time passcode."""

    status_code = 400
    default_message = 'Invalid or expired OTP'


class StoreError(AccountError):
    """The account database could not be reached or rejected the operation."""

    status_code = 500
    default_message = 'A database error occurred.'


class NotifyError(AccountError):
    """An email could not be handed to the delivery service."""

    status_code = 500
    default_message = 'The email could not be sent.'
