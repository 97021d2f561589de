# advising_portal/accounts/views.py
"""Account lifecycle operations.

An account moves through three states derived from its columns::

    UNVERIFIED            verification_token set, is_verified false
    VERIFIED_IDLE         is_verified true, otp_code empty
    VERIFIED_OTP_PENDING  is_verified true, otp_code set

Each function below is one transition. They hold no state of their own;
every read and write goes through :mod:`store`, and consuming a token or a
passcode is a compare-and-set so concurrent requests cannot both win.
"""
import hmac
import re
from datetime import timedelta
from urllib.parse import urlencode
from flask import current_app, url_for
from markupsafe import escape
from advising_portal.logging_config import setup_logging
from advising_portal.accounts import notifier, security, store
from advising_portal.accounts.errors import (
    AuthError,
    ConflictError,
    ForbiddenError,
    InvalidOTPError,
    NotFoundError,
    ValidationError,
)
from advising_portal.accounts.models import Account, utcnow
from advising_portal.accounts.validation import check_email, check_password, check_text, require

logger = setup_logging()

OTP_PATTERN = re.compile(r'[0-9]{6}')


def register_account(first_name, last_name, email, password):
    require(first_name, last_name, email, password)
    check_text(first_name, last_name, email, password)
    check_email(email)
    check_password(password)

    # Fast path only; store.insert is what actually guarantees uniqueness
    if store.find_by_email(email):
        logger.warning(f"Registration attempt with existing email: {email}")
        raise ConflictError()

    token = security.generate_token()
    account = Account(
        first_name=first_name,
        last_name=last_name,
        email=email,
        password_hash=security.hash_password(password),
        is_verified=False,
        is_admin=False,
        verification_token=token,
        verification_sent_at=utcnow(),
    )
    store.insert(account)
    logger.info(f"New account {email} registered; verification pending.")

    # Links never take their host from the request's Host header
    base_url = current_app.config['SERVER_BASE_URL'].rstrip('/')
    verify_link = base_url + url_for('user.verify_email', token=token)
    notifier.send_email(
        email,
        "Verify your email - Course Advising Portal",
        f"<p>Hi {escape(first_name)},</p>"
        f"<p>Click below to verify your account:</p>"
        f'<a href="{escape(verify_link)}">{escape(verify_link)}</a>'
    )
    return account


def verify_email(token):
    require(token, message='Verification token is required.')
    check_text(token)

    account = store.find_by_token(token)
    if not account:
        logger.warning("Email verification attempted with an unknown or used token.")
        raise NotFoundError('Invalid or expired verification link.')

    max_age = timedelta(hours=current_app.config['VERIFICATION_TOKEN_EXPIRY_HOURS'])
    if account.verification_sent_at and utcnow() - account.verification_sent_at > max_age:
        logger.warning(f"Expired verification token presented for {account.email}")
        raise NotFoundError('Invalid or expired verification link.')

    email = account.email
    rows = store.update_fields(
        email,
        {'is_verified': True, 'verification_token': None, 'verification_sent_at': None},
        verification_token=token,
    )
    if rows == 0:
        # Consumed by a concurrent request
        raise NotFoundError('Invalid or expired verification link.')

    logger.info(f"Email verified for {email}")
    return email


def sign_in(email, password):
    require(email, password)
    check_text(email, password)

    account = store.find_by_email(email)
    if not account or not security.verify_password(password, account.password_hash):
        logger.warning(f"Failed sign-in attempt for email: {email}")
        raise AuthError()

    if not account.is_verified:
        logger.warning(f"Sign-in attempt before verification: {email}")
        raise ForbiddenError()

    # A new code overwrites any pending one
    otp = security.generate_otp()
    store.update_fields(email, {'otp_code': str(otp), 'otp_created_at': utcnow()})

    expiry_minutes = current_app.config['OTP_EXPIRY_MINUTES']
    notifier.send_email(
        email,
        "Your OTP Code - Course Advising Portal",
        f"<p>Hello {escape(account.first_name)},</p>"
        f"<p>Your OTP code is: <strong>{otp}</strong></p>"
        f"<p>This code expires in {expiry_minutes} minutes.</p>"
    )
    logger.info(f"OTP issued for {email}")
    return email


def confirm_otp(email, otp):
    """Consume the pending passcode and return the account it belonged to."""
    require(email, otp, message='Email and OTP are required.')
    check_text(email)
    otp = str(otp).strip()
    if not OTP_PATTERN.fullmatch(otp):
        raise InvalidOTPError()

    account = store.find_by_email(email)
    if not account or not account.otp_code or not hmac.compare_digest(account.otp_code, otp):
        logger.warning(f"Invalid OTP presented for {email}")
        raise InvalidOTPError()

    max_age = timedelta(minutes=current_app.config['OTP_EXPIRY_MINUTES'])
    if account.otp_created_at and utcnow() - account.otp_created_at > max_age:
        logger.warning(f"Expired OTP presented for {email}")
        raise InvalidOTPError()

    rows = store.update_fields(email, {'otp_code': None, 'otp_created_at': None}, otp_code=otp)
    if rows == 0:
        raise InvalidOTPError()

    logger.info(f"OTP verified for {email}")
    return account


def request_password_reset(email):
    require(email, message='Email is required.')
    check_text(email)

    account = store.find_by_email(email)
    if not account:
        logger.warning(f"Password reset requested for unknown email: {email}")
        raise NotFoundError('Email not found')

    reset_link = f"{current_app.config['CLIENT_RESET_URL']}?{urlencode({'email': email})}"
    notifier.send_email(
        email,
        "Password Reset - Course Advising Portal",
        f"<p>Click below to reset your password:</p>"
        f'<a href="{escape(reset_link)}">{escape(reset_link)}</a>'
    )
    logger.info(f"Password reset email sent to {email}")


def reset_password(email, new_password):
    require(email, new_password, message='Email and new password are required.')
    check_text(email, new_password)
    check_password(new_password)

    rows = store.update_fields(email, {'password_hash': security.hash_password(new_password)})
    if rows == 0:
        logger.warning(f"Password reset for unknown email: {email}")
        raise NotFoundError('Email not found')

    logger.info(f"Password reset for {email}")


def update_profile(email, first_name=None, last_name=None, password=None):
    require(email, message='Email is required.')
    check_text(email, first_name, last_name, password)

    fields = {}
    if first_name and first_name.strip():
        fields['first_name'] = first_name
    if last_name and last_name.strip():
        fields['last_name'] = last_name
    if password:
        check_password(password)
        fields['password_hash'] = security.hash_password(password)

    if not fields:
        if not store.find_by_email(email):
            raise NotFoundError('User not found.')
        raise ValidationError('Nothing to update.')

    rows = store.update_fields(email, fields)
    if rows == 0:
        logger.warning(f"Profile update for unknown email: {email}")
        raise NotFoundError('User not found.')

    logger.info(f"Profile updated for {email}: {', '.join(sorted(fields))}")


def get_profile(email):
    require(email, message='Email is required.')
    check_text(email)

    account = store.find_by_email(email)
    if not account:
        raise NotFoundError('User not found.')
    return account.to_profile()
