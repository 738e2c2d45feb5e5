"""Seller metric record - one row of ``seller_metrics_view``."""
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from src.services.utils import to_datetime, to_float, to_int


@dataclass(frozen=True)
class SellerMetric:
    seller_phone: str
    seller_name: str | None
    city: str | None
    total_listings_history: int
    current_active_listings: int
    catalog_quality_score: float
    avg_listings_recent: float | None
    last_scan_date: datetime | None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "SellerMetric":
        """Build from a raw view row, converting numeric columns exactly once."""
        return cls(
            seller_phone=str(row["seller_phone"]),
            seller_name=row.get("seller_name"),
            city=row.get("city"),
            total_listings_history=to_int(row.get("total_listings_history")),
            current_active_listings=to_int(row.get("current_active_listings")),
            catalog_quality_score=to_float(row.get("catalog_quality_score"), 0.0),
            avg_listings_recent=to_float(row.get("avg_listings_recent")),
            last_scan_date=to_datetime(row.get("last_scan_date")),
        )

    @property
    def display_name(self) -> str:
        return self.seller_name or self.seller_phone
