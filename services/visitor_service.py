from typing import Mapping, Optional, Tuple

from sqlalchemy.engine import Engine
from sqlmodel import Session, select, func

from models.visitor import Visitor, UNKNOWN_LOCATION
from schemas.visitor import VisitorStats

FORWARDED_FOR = "x-forwarded-for"


def client_ip(headers: Mapping[str, str], client: Optional[Tuple[str, int]]) -> str:
    """Address of the caller, preferring the first hop of X-Forwarded-For."""
    forwarded = headers.get(FORWARDED_FOR)
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    if client and client[0]:
        return client[0]
    return "unknown"


def record_visit(session: Session, ip: str) -> Visitor:
    visitor = Visitor(ip=ip, location=UNKNOWN_LOCATION)
    session.add(visitor)
    session.commit()
    session.refresh(visitor)
    return visitor


def try_record_visit(engine: Engine, ip: str) -> Optional[Exception]:
    """Record a visit, handing back the error instead of raising it."""
    try:
        with Session(engine) as session:
            record_visit(session, ip)
    except Exception as e:
        return e
    return None


def count_visitors(session: Session) -> int:
    return session.exec(select(func.count(Visitor.id))).one()


def latest_visitor(session: Session) -> Optional[Visitor]:
    statement = (
        select(Visitor)
        .order_by(Visitor.date.desc(), Visitor.id.desc())
        .limit(1)
    )
    return session.exec(statement).first()


def visitor_stats(session: Session) -> VisitorStats:
    total_visitors = count_visitors(session)
    last = latest_visitor(session)
    return VisitorStats(
        total_visitors=total_visitors,
        last_visitor=last.date if last else None,
    )
