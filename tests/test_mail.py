import json
import unittest
from unittest.mock import patch

import requests

from sendgrid_client.api import SendGridAPI
from sendgrid_client.base import DEFAULT_API_URL
from sendgrid_client.exceptions import ProviderError, TransportError
from sendgrid_client.models import build_message
from helpers import make_response


class TestSendEmail(unittest.TestCase):
    def setUp(self):
        self.api = SendGridAPI("SG.test-key")
        self.message = {
            "personalizations": [{"to": [{"email": "jane@example.com"}], "subject": "Hello"}],
            "from": {"name": "Forms", "email": "forms@example.com"},
            "content": [{"type": "text/html", "value": "<p>Hi</p>"}]
        }

    @patch('requests.request')
    def test_dict_message_is_posted(self, mock_request):
        mock_request.return_value = make_response(None, status_code=202, text="")

        result = self.api.send_email(self.message)

        self.assertEqual(result, {})
        args, kwargs = mock_request.call_args
        self.assertEqual(args, ("POST", f"{DEFAULT_API_URL}mail/send"))
        self.assertEqual(json.loads(kwargs["data"]), self.message)
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer SG.test-key")

    @patch('requests.request')
    def test_model_message_is_serialized(self, mock_request):
        mock_request.return_value = make_response(None, status_code=202, text="")
        message = build_message("jane@example.com", "forms@example.com", "Hello", "<p>Hi</p>", from_name="Forms")

        self.api.send_email(message)

        sent = json.loads(mock_request.call_args[1]["data"])
        self.assertEqual(sent["from"], {"email": "forms@example.com", "name": "Forms"})
        self.assertEqual(sent["personalizations"], [{"to": [{"email": "jane@example.com"}], "subject": "Hello"}])
        self.assertEqual(sent["content"], [{"type": "text/html", "value": "<p>Hi</p>"}])

    @patch('requests.request')
    def test_provider_errors_propagate(self, mock_request):
        mock_request.return_value = make_response({
            "errors": [{"field": "to", "message": "invalid"}, {"field": "from", "message": "invalid"}]
        }, status_code=400)

        with self.assertRaises(ProviderError) as ctx:
            self.api.send_email(self.message)

        self.assertEqual(str(ctx.exception), "to;invalid;from;invalid")
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertIn("errors", ctx.exception.response)

    @patch('requests.request')
    def test_failed_send_is_not_retried(self, mock_request):
        mock_request.side_effect = requests.ConnectionError("connection reset")

        with self.assertRaises(TransportError):
            self.api.send_email(self.message)

        self.assertEqual(mock_request.call_count, 1)


if __name__ == '__main__':
    unittest.main()
