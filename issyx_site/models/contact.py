from pydantic import BaseModel, ConfigDict, StrictStr
from typing import Optional
import re

# local-part@domain with at least one dot in the domain; format only, not deliverability
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_FIELDS = ("firstName", "lastName", "email", "company")


class ContactSubmission(BaseModel):
    """Demo request posted by the website contact form"""
    model_config = ConfigDict(extra="ignore")

    firstName: StrictStr
    lastName: StrictStr
    email: StrictStr
    company: StrictStr
    deviceCount: Optional[StrictStr] = None
    interest: Optional[StrictStr] = None
    message: Optional[StrictStr] = None

    @property
    def full_name(self) -> str:
        return f"{self.firstName} {self.lastName}"


def missing_required_fields(payload: dict) -> list:
    """Names of required fields that are absent or empty in a raw form payload"""
    return [name for name in REQUIRED_FIELDS if not payload.get(name)]


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None
