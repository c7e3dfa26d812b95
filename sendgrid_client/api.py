from .mail import MailManager
from .scopes import ScopeManager
from .stats import StatsManager


class SendGridAPI(StatsManager, ScopeManager, MailManager):
    """Client exposing every SendGrid operation the add-on uses."""
