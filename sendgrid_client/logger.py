import logging
from typing import Optional


def logging_bootstrap(level=logging.DEBUG):
    logging.basicConfig(format='[%(asctime)s] \t %(levelname)s:%(message)s', level=level)


class AddOnLogger:
    """
    Default logging collaborator handed to the client.

    Anything exposing ``log_error(message)`` can replace it, e.g. the host
    plugin's own logger.
    """

    def __init__(self, name: str = "sendgrid_client", slug: Optional[str] = None):
        self._logger = logging.getLogger(name)
        self.slug = slug

    def log_error(self, message: str):
        self._logger.error(f"{self.slug}: {message}" if self.slug else message)
