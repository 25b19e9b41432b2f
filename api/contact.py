import logging

from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from starlette.concurrency import run_in_threadpool

from core.errors import ApiError, INTERNAL_ERROR, MISSING_FIELDS
from core.mail import Mailer, get_mailer
from database import get_session
from schemas.contact import ContactSubmission, ContactResponse
from services.contact_service import notification_body, notification_subject, save_contact_message

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/contact", response_model=ContactResponse)
async def submit_contact_message(
    data: ContactSubmission,
    session: Session = Depends(get_session),
    mailer: Mailer = Depends(get_mailer),
):
    if not data.is_complete():
        raise ApiError(status.HTTP_400_BAD_REQUEST, MISSING_FIELDS)

    try:
        # Stored before the mail goes out: nothing is relayed unrecorded
        contact_message = await run_in_threadpool(save_contact_message, session, data)
        await mailer.send_notification(
            notification_subject(contact_message.subject),
            notification_body(contact_message),
        )
    except Exception:
        logger.exception("Error handling contact form")
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    return {"message": "Message sent successfully."}
