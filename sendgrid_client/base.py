import json
import logging
from urllib.parse import urlencode

import requests

from .exceptions import DecodeError, ProviderError, TransportError
from .logger import AddOnLogger

DEFAULT_API_URL = "https://api.sendgrid.com/v3/"
REQUEST_TIMEOUT = 60


class SendGridClient:
    def __init__(self, api_key: str, base_url: str = DEFAULT_API_URL, logger=None):
        self._api_key = api_key
        self._base_url = base_url
        self.logger = logger if logger is not None else AddOnLogger()
        self.headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json"
        }

    @property
    def api_key(self):
        return self._api_key

    @property
    def base_url(self):
        return self._base_url

    def _build_url(self, action, options, method):
        # GET always carries a query string, even an empty one
        if method == "GET":
            return f"{self._base_url}{action}?{urlencode(options, doseq=True)}"
        return f"{self._base_url}{action}"

    def _request(self, action, options=None, method="GET", return_key=None):
        """
        Sends a single request to the SendGrid API.

        :param action: endpoint path relative to the base URL, e.g. "stats"
        :param options: query parameters for GET, JSON body otherwise
        :param method: HTTP method
        :param return_key: key to unwrap from the decoded response, if present
        :return: decoded JSON response
        """
        options = options if options is not None else {}
        url = self._build_url(action, options, method)
        data = json.dumps(options) if method != "GET" else None

        logging.debug(F"[+] {method} {url}")
        try:
            resp = requests.request(method, url, headers=self.headers, data=data, timeout=REQUEST_TIMEOUT)
        except requests.RequestException as e:
            raise TransportError(f"Request failed. {e}") from e

        try:
            body = resp.json() if resp.text else {}
        except ValueError as e:
            raise DecodeError(f"Unable to decode response: {e}", status_code=resp.status_code) from e

        if isinstance(body, dict):
            message = self._error_message(body)
            if message is not None:
                raise ProviderError(message, status_code=resp.status_code, response=body)

            if return_key and body.get(return_key) is not None:
                return body[return_key]

        return body

    @staticmethod
    def _error_message(body):
        error = body.get("error")
        if error is not None:
            if isinstance(error, dict):
                return str(error.get("message", ""))
            return str(error)

        errors = body.get("errors")
        if errors is None:
            return None
        if isinstance(errors, list):
            parts = []
            for entry in errors:
                if isinstance(entry, dict):
                    parts.extend("" if value is None else str(value) for value in entry.values())
                else:
                    parts.append(str(entry))
            return ";".join(parts)
        return str(errors)
