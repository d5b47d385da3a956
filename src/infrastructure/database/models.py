"""SQLAlchemy ORM models."""

from datetime import date as calendar_date, datetime

from sqlalchemy import BigInteger, CheckConstraint, Date, DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class ActivityModel(Base):
    """Logged activity model."""

    __tablename__ = "activities"
    __table_args__ = (CheckConstraint("minutes >= 0", name="ck_activities_minutes_non_negative"),)

    # Integer (not BigInteger) so SQLite treats it as a rowid alias and autoincrements.
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    minutes: Mapped[int] = mapped_column(BigInteger, nullable=False)
    date: Mapped[calendar_date] = mapped_column(Date, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )
