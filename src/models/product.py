"""Product model - one catalog listing observed on a seller's storefront."""
import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class Product(Base):
    __tablename__ = "products"

    id: Mapped[str] = mapped_column(Text, primary_key=True, default=_new_id)
    seller_phone: Mapped[str] = mapped_column(
        Text, ForeignKey("sellers.phone_number"), nullable=False
    )
    raw_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    raw_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[float | None] = mapped_column(Float, nullable=True)
    currency: Mapped[str | None] = mapped_column(Text, nullable=True)
    availability: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    model_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    storage_gb: Mapped[str | None] = mapped_column(Text, nullable=True)
    color: Mapped[str | None] = mapped_column(Text, nullable=True)
    warranty: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    first_seen_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    last_seen_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    last_price_change_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    seller = relationship("Seller", back_populates="products")
    history = relationship("ProductHistory", back_populates="product")

    @property
    def display_name(self) -> str:
        return self.raw_name or self.model_name or "Unnamed Product"

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.raw_name!r}>"
