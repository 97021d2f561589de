# advising_portal/accounts/models.py
from datetime import datetime, timezone
from flask_login import UserMixin
from advising_portal.init_db import db


def utcnow():
    """Naive UTC timestamp, matching what SQLite hands back."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Account(UserMixin, db.Model):
    __tablename__ = 'user_information'
    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(50), nullable=False)
    last_name = db.Column(db.String(50), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    is_verified = db.Column(db.Boolean, nullable=False, default=False)
    is_admin = db.Column(db.Boolean, nullable=False, default=False)
    verification_token = db.Column(db.String(64), unique=True, nullable=True)
    verification_sent_at = db.Column(db.DateTime, nullable=True)
    otp_code = db.Column(db.String(6), nullable=True)
    otp_created_at = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, default=utcnow)

    def to_profile(self):
        # password_hash is deliberately left out
        return {
            'firstName': self.first_name,
            'lastName': self.last_name,
            'email': self.email,
            'isVerified': self.is_verified,
        }

    def __repr__(self):
        return f'<Account {self.email}>'
