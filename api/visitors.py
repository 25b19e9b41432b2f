import logging

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from core.errors import ApiError, INTERNAL_ERROR
from database import get_session
from schemas.visitor import VisitorStats
from services.visitor_service import visitor_stats

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/visitors", response_model=VisitorStats)
def read_visitor_stats(session: Session = Depends(get_session)):
    try:
        return visitor_stats(session)
    except Exception:
        logger.exception("Error fetching visitors")
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
