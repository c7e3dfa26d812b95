import json
import logging
import sys

from sendgrid_client.api import SendGridAPI
from sendgrid_client.config import load_settings
from sendgrid_client.exceptions import RequestError
from sendgrid_client.logger import AddOnLogger, logging_bootstrap


if __name__ == "__main__":
    logging_bootstrap()
    properties_path = sys.argv[1]
    days = int(sys.argv[2]) if len(sys.argv) > 2 else 30

    try:
        settings = load_settings(properties_path)
    except (OSError, ValueError) as e:
        logging.error(f"Unable to read settings: {e}")
        sys.exit(1)

    api = SendGridAPI(settings.api_key, settings.api_url, logger=AddOnLogger(slug="gravityformssendgrid"))

    scopes = api.load_scopes()
    logging.info(F"[+] Scopes granted: {scopes}")

    if not api.has_scope("stats.read"):
        logging.error("API key is missing the stats.read scope.")
        sys.exit(1)

    try:
        stats = api.get_stats(days)
    except RequestError as e:
        logging.error(f"Unable to get SendGrid stats: {e}")
        sys.exit(1)

    print(json.dumps(stats, indent=2))
