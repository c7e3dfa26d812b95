from .base import SendGridClient
from .models import MailMessage


class MailManager(SendGridClient):
    def send_email(self, message):
        """
        Sends an email through the mail/send endpoint.

        :param message: MailMessage or a dict following SendGrid's mail/send schema
        :return: API response JSON (empty dict when SendGrid accepts with no body)
        """
        if isinstance(message, MailMessage):
            message = message.to_payload()
        return self._request("mail/send", message, "POST")
