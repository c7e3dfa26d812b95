"""Pydantic models for the SendGrid v3 mail/send payload."""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class EmailAddress(BaseModel):
    email: str
    name: Optional[str] = None


class Personalization(BaseModel):
    to: List[EmailAddress]
    cc: Optional[List[EmailAddress]] = None
    bcc: Optional[List[EmailAddress]] = None
    subject: Optional[str] = None


class Content(BaseModel):
    type: str = Field("text/html", description="MIME type of the body part")
    value: str


class MailMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    personalizations: List[Personalization]
    from_: EmailAddress = Field(..., alias="from")
    reply_to: Optional[EmailAddress] = None
    subject: Optional[str] = None
    content: List[Content]

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


def build_message(to: Union[str, List[str]], from_email: str, subject: str, body: str,
                  from_name: Optional[str] = None, content_type: str = "text/html") -> MailMessage:
    """
    Builds a message with one personalization block.

    :param to: recipient address, or a list of them
    :param from_email: sender address
    :param subject: subject line
    :param body: message body
    :param from_name: sender display name
    :param content_type: MIME type of the body
    :return: MailMessage ready for MailManager.send_email
    """
    recipients = [to] if isinstance(to, str) else list(to)
    return MailMessage(
        personalizations=[Personalization(to=[EmailAddress(email=r) for r in recipients], subject=subject)],
        from_=EmailAddress(email=from_email, name=from_name),
        content=[Content(type=content_type, value=body)]
    )
