"""Scan log model - one run of the storefront scanner against a seller."""
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.database import Base


class ScanLog(Base):
    __tablename__ = "scan_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    seller_phone: Mapped[str] = mapped_column(
        Text, ForeignKey("sellers.phone_number"), nullable=False
    )
    scan_time: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    status: Mapped[str] = mapped_column(Text, default="success")  # success | failed | partial
    products_found: Mapped[int | None] = mapped_column(Integer, nullable=True)
    new_products: Mapped[int | None] = mapped_column(Integer, nullable=True)
    removed_products: Mapped[int | None] = mapped_column(Integer, nullable=True)
    duration_ms: Mapped[int | None] = mapped_column(Integer, nullable=True)
    error_message: Mapped[str | None] = mapped_column(Text, nullable=True)

    seller = relationship("Seller", back_populates="scan_logs")

    def __repr__(self) -> str:
        return f"<ScanLog id={self.id} seller={self.seller_phone!r} status={self.status!r}>"
