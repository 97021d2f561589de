# advising_portal/config.py
import os
import binascii


def _split_origins(raw):
    return [origin.strip() for origin in raw.split(',') if origin.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or binascii.hexlify(os.urandom(24)).decode()

    BASE_DIR = os.path.abspath(os.path.dirname(__file__))

    DATABASE_PATH = os.path.join(BASE_DIR, 'flask_data.db')

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', f'sqlite:///{DATABASE_PATH}')

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    PORT = int(os.environ.get('PORT', 8080))

    CORS_ORIGINS = _split_origins(os.environ.get('CORS_ORIGINS', 'http://127.0.0.1:5500'))

    # Brevo transactional email
    MAIL_SENDER_EMAIL = os.environ.get('EMAIL_USER')
    MAIL_SENDER_NAME = os.environ.get('EMAIL_SENDER_NAME', 'Course Advising Portal')
    MAIL_API_KEY = os.environ.get('EMAIL_PASS')
    MAIL_TIMEOUT = float(os.environ.get('MAIL_TIMEOUT', 10))

    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD', 'pbkdf2:sha256')
    PASSWORD_MIN_LENGTH = int(os.environ.get('PASSWORD_MIN_LENGTH', 6))

    OTP_EXPIRY_MINUTES = int(os.environ.get('OTP_EXPIRY_MINUTES', 10))
    VERIFICATION_TOKEN_EXPIRY_HOURS = int(os.environ.get('VERIFICATION_TOKEN_EXPIRY_HOURS', 24))

    STORE_READ_RETRIES = int(os.environ.get('STORE_READ_RETRIES', 1))

    # Public address of this service, used for links in outgoing email
    SERVER_BASE_URL = os.environ.get('SERVER_BASE_URL', 'http://localhost:8080')

    CLIENT_SIGNIN_URL = os.environ.get('CLIENT_SIGNIN_URL', 'http://127.0.0.1:5500/client/signin.html')
    CLIENT_RESET_URL = os.environ.get('CLIENT_RESET_URL', 'http://127.0.0.1:5500/client/reset.html')

    LOG_TIMEZONE = os.environ.get('LOG_TIMEZONE', 'UTC')


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
    MAIL_SENDER_EMAIL = 'noreply@advising.test'
    MAIL_API_KEY = 'test-api-key'
    MAIL_TIMEOUT = 1
    STORE_READ_RETRIES = 0
