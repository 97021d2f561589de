"""Shared fixtures for the account service tests."""

import re
from unittest import TestCase, mock

from advising_portal.app_factory import create_app
from advising_portal.init_db import db

TEST_CONFIG = 'advising_portal.config.TestConfig'

TOKEN_PATTERN = re.compile(r'token=([A-Za-z0-9_\-]+)')
OTP_PATTERN = re.compile(r'<strong>(\d{6})</strong>')


class NotifierMixin:
    """Replaces outbound email with a mock and reads back what was sent."""

    def patch_notifier(self):
        patcher = mock.patch('advising_portal.accounts.views.notifier')
        self.mock_notifier = patcher.start()
        self.addCleanup(patcher.stop)

    def last_email(self):
        to, subject, body = self.mock_notifier.send_email.call_args[0]
        return to, subject, body

    def last_token(self):
        return TOKEN_PATTERN.search(self.last_email()[2]).group(1)

    def last_otp(self):
        return OTP_PATTERN.search(self.last_email()[2]).group(1)


class EngineTestCase(NotifierMixin, TestCase):
    """Runs each test inside a request context of a fresh in-memory app."""

    def setUp(self):
        self.app = create_app(TEST_CONFIG)
        self.context = self.app.test_request_context()
        self.context.push()
        self.patch_notifier()

    def tearDown(self):
        db.session.remove()
        db.drop_all()
        self.context.pop()


class ClientTestCase(NotifierMixin, TestCase):
    """Drives the application through the Flask test client."""

    def setUp(self):
        self.app = create_app(TEST_CONFIG)
        self.client = self.app.test_client()
        self.patch_notifier()

    def tearDown(self):
        with self.app.app_context():
            db.session.remove()
            db.drop_all()
