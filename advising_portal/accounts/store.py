# advising_portal/accounts/store.py
"""Point reads and writes against the ``user_information`` table.

Every SQLAlchemy failure leaves this module as :class:`StoreError`, except a
unique-constraint violation on insert, which becomes :class:`ConflictError`.
"""
from flask import current_app
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from advising_portal.init_db import db
from advising_portal.logging_config import setup_logging
from advising_portal.accounts.errors import ConflictError, StoreError
from advising_portal.accounts.models import Account

logger = setup_logging()


def _read(description, query):
    """Run a read, retrying on dropped connections."""
    retries = current_app.config.get('STORE_READ_RETRIES', 0)
    attempt = 0
    while True:
        attempt += 1
        try:
            return query()
        except OperationalError as e:
            db.session.rollback()
            logger.error(f"OperationalError during {description} (attempt {attempt}): {e}")
            if attempt > retries:
                raise StoreError() from e
            db.engine.dispose()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Database error during {description}: {e}")
            raise StoreError() from e


def find_by_email(email):
    return _read('account lookup by email',
                 lambda: Account.query.filter_by(email=email).first())


def find_by_token(token):
    return _read('account lookup by verification token',
                 lambda: Account.query.filter_by(verification_token=token).first())


def insert(account):
    """Persist a new account; the unique constraint on email decides races."""
    try:
        db.session.add(account)
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        logger.warning(f"Insert rejected by unique constraint for email: {account.email}")
        raise ConflictError() from e
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Database error inserting account {account.email}: {e}")
        raise StoreError() from e
    return account


def update_fields(email, fields, **conditions):
    """Update columns of the account keyed by ``email``.

    Extra keyword ``conditions`` narrow the match to rows whose columns still
    hold those values, which makes the update a compare-and-set. Returns the
    number of rows changed.
    """
    try:
        rows = (Account.query
                .filter_by(email=email, **conditions)
                .update(fields, synchronize_session=False))
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Database error updating account {email}: {e}")
        raise StoreError() from e
    # Drop stale identity-map copies so later reads see the new values
    db.session.expire_all()
    return rows
