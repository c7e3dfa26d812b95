import logging
import sys

from sendgrid_client.api import SendGridAPI
from sendgrid_client.config import load_settings
from sendgrid_client.exceptions import RequestError
from sendgrid_client.logger import logging_bootstrap
from sendgrid_client.models import build_message


def send_test_email():
    try:
        settings = load_settings(properties_path)
    except (OSError, ValueError) as e:
        logging.error(f"Unable to read settings: {e}")
        sys.exit(1)

    api = SendGridAPI(settings.api_key, settings.api_url)
    api.load_scopes()
    if not api.has_scope("mail.send"):
        logging.error("API key is missing the mail.send scope.")
        sys.exit(1)

    message = build_message(
        to=to_email,
        from_email=from_email,
        subject="SendGrid test email",
        body="<p>This is a test, please ignore.</p>"
    )
    try:
        response = api.send_email(message)
    except RequestError as e:
        logging.error(f"Unable to send test email: {e}")
        sys.exit(1)

    logging.info(F"[+] Test email sent to {to_email}: {response}")


if __name__ == "__main__":
    logging_bootstrap()
    properties_path = sys.argv[1]
    to_email = sys.argv[2]
    from_email = sys.argv[3]
    send_test_email()
