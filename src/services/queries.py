"""Bulk read-only queries feeding the listing pages.

Each function loads the whole collection in one round trip (relationships
eagerly loaded) and returns detached records that stay usable after the
session closes.
"""
import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from src.models.database import METRICS_VIEW, with_db
from src.models.product import Product
from src.models.product_history import ProductHistory
from src.models.scan_log import ScanLog
from src.models.seller import Seller
from src.models.seller_metric import SellerMetric

logger = logging.getLogger(__name__)


def get_sellers() -> list[Seller]:
    """All sellers, newest first."""
    with with_db() as db:
        try:
            return db.query(Seller).order_by(Seller.created_at.desc()).all()
        except SQLAlchemyError:
            logger.exception("Failed to load sellers")
            raise


def get_products() -> list[Product]:
    """All products with their seller, most recently seen first."""
    with with_db() as db:
        try:
            return (
                db.query(Product)
                .options(joinedload(Product.seller))
                .order_by(Product.last_seen_at.desc())
                .all()
            )
        except SQLAlchemyError:
            logger.exception("Failed to load products")
            raise


def get_product_history() -> list[ProductHistory]:
    """All history entries with product and seller, newest first."""
    with with_db() as db:
        try:
            return (
                db.query(ProductHistory)
                .options(joinedload(ProductHistory.product).joinedload(Product.seller))
                .order_by(ProductHistory.recorded_at.desc())
                .all()
            )
        except SQLAlchemyError:
            logger.exception("Failed to load product history")
            raise


def get_scan_logs() -> list[ScanLog]:
    """All scan logs with their seller, newest first."""
    with with_db() as db:
        try:
            return (
                db.query(ScanLog)
                .options(joinedload(ScanLog.seller))
                .order_by(ScanLog.scan_time.desc())
                .all()
            )
        except SQLAlchemyError:
            logger.exception("Failed to load scan logs")
            raise


def get_seller_metrics() -> list[SellerMetric]:
    """Aggregated per-seller metrics from the metrics view, by phone number."""
    with with_db() as db:
        try:
            rows = db.execute(
                text(f"SELECT * FROM {METRICS_VIEW} ORDER BY seller_phone")
            ).all()
        except SQLAlchemyError:
            logger.exception("Failed to load seller metrics")
            raise
    return [SellerMetric.from_row(row._mapping) for row in rows]
