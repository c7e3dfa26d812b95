class RequestError(Exception):
    """Base class for every failure raised by the SendGrid client."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self):
        return self.message


class TransportError(RequestError):
    """No response was obtained (DNS, timeout, connection reset)."""


class DecodeError(RequestError):
    """The response body is not valid JSON."""


class ProviderError(RequestError):
    """SendGrid answered with an `error` or `errors` field."""

    def __init__(self, message, status_code=None, response=None):
        super().__init__(message, status_code=status_code)
        self.response = response
