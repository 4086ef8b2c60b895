from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Base(DeclarativeBase):
    pass


def enum_values(enum_cls) -> list[str]:
    # Persist enum values ("Approved"), not member names ("APPROVED").
    return [member.value for member in enum_cls]
