from pydantic import BaseModel
from typing import Optional


class ContactSubmission(BaseModel):
    # Presence of name/email/message is checked by the endpoint so that a
    # missing field is answered with 400 instead of a validation error.
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None

    def is_complete(self) -> bool:
        return bool(self.name and self.email and self.message)


class ContactResponse(BaseModel):
    message: str
