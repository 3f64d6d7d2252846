from pydantic import BaseModel, ConfigDict, Field
from typing import List


class NotificationMessage(BaseModel):
    """Email payload in the shape the Resend API expects"""
    model_config = ConfigDict(populate_by_name=True)

    sender: str = Field(..., alias="from")
    to: List[str]
    reply_to: str
    subject: str
    html: str

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class DeliveryResult(BaseModel):
    """Outcome of one call to the email delivery API"""
    ok: bool
    status_code: int
    body: str = ""
