from .base import SendGridClient
from .exceptions import ProviderError, RequestError


class ScopeManager(SendGridClient):
    """
    Keeps the scopes granted to the API key.

    The cache is only written by ``load_scopes`` and is not safe for
    concurrent mutation; share a client across threads only with external
    locking.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.scopes = []

    def has_scope(self, scope: str = "") -> bool:
        return scope in self.scopes

    def load_scopes(self):
        """
        Loads the scopes available for the API key.

        Failures are logged and never raised; the previously loaded scopes
        (empty if none) are returned instead.

        :return: list of scope names
        """
        try:
            body = self._request("scopes", {}, "GET")
            if not isinstance(body, dict) or not isinstance(body.get("scopes"), list):
                raise ProviderError("Response does not contain a scopes list", response=body)
            self.scopes = body["scopes"]
        except RequestError as e:
            self.logger.log_error(f"{type(self).__name__}.load_scopes(): Unable to get SendGrid scopes; {e}")

        return self.scopes
