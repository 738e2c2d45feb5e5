"""Database models package."""
from src.models.database import Base, engine, SessionLocal, get_session, with_db, init_db
from src.models.seller import Seller
from src.models.product import Product
from src.models.product_history import ProductHistory
from src.models.scan_log import ScanLog
from src.models.seller_metric import SellerMetric

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "get_session",
    "with_db",
    "init_db",
    "Seller",
    "Product",
    "ProductHistory",
    "ScanLog",
    "SellerMetric",
]
