"""Seller model."""
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.database import Base


class Seller(Base):
    __tablename__ = "sellers"

    phone_number: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    city: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    products = relationship("Product", back_populates="seller")
    scan_logs = relationship("ScanLog", back_populates="seller")

    @property
    def display_name(self) -> str:
        return self.name or self.phone_number

    def __repr__(self) -> str:
        return f"<Seller phone={self.phone_number!r} name={self.name!r}>"
