from .api import SendGridAPI
from .base import DEFAULT_API_URL, SendGridClient
from .exceptions import DecodeError, ProviderError, RequestError, TransportError
from .logger import AddOnLogger, logging_bootstrap
from .models import MailMessage, build_message

__all__ = [
    "AddOnLogger",
    "DEFAULT_API_URL",
    "DecodeError",
    "MailMessage",
    "ProviderError",
    "RequestError",
    "SendGridAPI",
    "SendGridClient",
    "TransportError",
    "build_message",
    "logging_bootstrap",
]
