"""Expense model - a single tracked expense record."""
import datetime as dt
from typing import Optional

from sqlalchemy import BigInteger, Integer, String, Float, Date, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from database.base import Base


class Expense(Base):
    """Expense model."""
    
    __tablename__ = "expenses"
    
    # Primary key (plain INTEGER on SQLite so it autoincrements)
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )
    
    # Expense details
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    category: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    
    # Calendar date of the expense (no time component)
    date: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True)
    note: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    
    # Set when the object is constructed, not when it is flushed
    created_at: Mapped[dt.datetime] = mapped_column(DateTime, nullable=False)
    
    def __init__(self, **kwargs):
        kwargs.setdefault("created_at", dt.datetime.now())
        super().__init__(**kwargs)
    
    def __repr__(self) -> str:
        return (
            f"<Expense(id={self.id}, title='{self.title}', "
            f"amount={self.amount}, category='{self.category}')>"
        )
