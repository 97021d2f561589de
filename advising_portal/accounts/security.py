# advising_portal/accounts/security.py
import secrets
from flask import current_app
from werkzeug.security import generate_password_hash, check_password_hash

OTP_MIN = 100000
OTP_MAX = 999999

_random = secrets.SystemRandom()


def hash_password(plaintext):
    method = current_app.config.get('PASSWORD_HASH_METHOD', 'pbkdf2:sha256')
    return generate_password_hash(plaintext, method=method)


def verify_password(plaintext, password_hash):
    if not plaintext or not password_hash:
        return False
    return check_password_hash(password_hash, plaintext)


def generate_token():
    # 32 random bytes, URL-safe so it can sit in a query string
    return secrets.token_urlsafe(32)


# Function to generate a 6-digit OTP
def generate_otp():
    return _random.randint(OTP_MIN, OTP_MAX)
