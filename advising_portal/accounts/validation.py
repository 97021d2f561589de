# advising_portal/accounts/validation.py
import re
from flask import current_app
from advising_portal.accounts.errors import ValidationError

EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


def require(*values, message='All fields are required.'):
    if any(value is None or (isinstance(value, str) and not value.strip()) for value in values):
        raise ValidationError(message)


def check_email(email):
    if not isinstance(email, str) or not EMAIL_PATTERN.fullmatch(email):
        raise ValidationError('Invalid email address.')


def check_password(password):
    min_length = current_app.config.get('PASSWORD_MIN_LENGTH', 6)
    if not isinstance(password, str) or len(password) < min_length:
        raise ValidationError(f'Password must be at least {min_length} characters long.')


def check_text(*values):
    """Reject JSON numbers, lists and objects where a string is expected."""
    if any(value is not None and not isinstance(value, str) for value in values):
        raise ValidationError('Fields must be text.')
