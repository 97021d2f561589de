# advising_portal/accounts/notifier.py
import sib_api_v3_sdk
import urllib3
from flask import current_app
from sib_api_v3_sdk.rest import ApiException
from advising_portal.logging_config import setup_logging
from advising_portal.accounts.errors import NotifyError

logger = setup_logging()

_EXTENSION_KEY = 'brevo_email_api'


def get_email_api():
    """Return the application's shared Brevo client, building it on first use."""
    api_instance = current_app.extensions.get(_EXTENSION_KEY)
    if api_instance is None:
        api_key = current_app.config.get('MAIL_API_KEY')
        if not api_key:
            return None

        # Initialize Brevo API client
        configuration = sib_api_v3_sdk.Configuration()
        configuration.api_key['api-key'] = api_key
        api_client = sib_api_v3_sdk.ApiClient(configuration)
        api_instance = sib_api_v3_sdk.TransactionalEmailsApi(api_client)
        current_app.extensions[_EXTENSION_KEY] = api_instance
    return api_instance


def send_email(to, subject, html_content):
    """Hand one email to Brevo, raising NotifyError if it was not accepted."""
    sender_email = current_app.config.get('MAIL_SENDER_EMAIL')
    api_instance = get_email_api()
    if not api_instance or not sender_email:
        logger.error("Email delivery is not configured; set EMAIL_USER and EMAIL_PASS.")
        raise NotifyError()

    send_smtp_email = sib_api_v3_sdk.SendSmtpEmail(
        to=[{"email": to}],
        sender={"name": current_app.config.get('MAIL_SENDER_NAME'), "email": sender_email},
        subject=subject,
        html_content=html_content
    )

    try:
        api_response = api_instance.send_transac_email(
            send_smtp_email,
            _request_timeout=current_app.config.get('MAIL_TIMEOUT', 10)
        )
    except ApiException as e:
        logger.error(f"Exception when calling TransactionalEmailsApi->send_transac_email: {e.status} {e.reason}")
        raise NotifyError() from e
    except urllib3.exceptions.HTTPError as e:
        # Connection failures and timeouts
        logger.error(f"Email transport failed for '{subject}': {e}")
        raise NotifyError() from e

    logger.info(f"Email '{subject}' accepted for delivery: {getattr(api_response, 'message_id', None)}")
    return api_response
