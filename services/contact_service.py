from sqlmodel import Session

from models.contact_message import ContactMessage
from schemas.contact import ContactSubmission

NOTIFICATION_SUBJECT = "New Contact Form Message"


def save_contact_message(session: Session, data: ContactSubmission) -> ContactMessage:
    contact_message = ContactMessage(
        name=data.name,
        email=data.email,
        phone=data.phone,
        subject=data.subject,
        message=data.message,
    )
    session.add(contact_message)
    session.commit()
    session.refresh(contact_message)
    return contact_message


def notification_subject(subject: str | None) -> str:
    if subject:
        return f"{NOTIFICATION_SUBJECT}: {subject}"
    return NOTIFICATION_SUBJECT


def notification_body(contact_message: ContactMessage) -> str:
    return (
        f"You have a new message from {contact_message.name} ({contact_message.email}):\n"
        f"Phone: {contact_message.phone or 'N/A'}\n"
        f"Subject: {contact_message.subject or 'N/A'}\n"
        f"\n"
        f"{contact_message.message}"
    )
