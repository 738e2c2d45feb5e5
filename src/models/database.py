"""Database engine, session factory, and base model."""
import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from config import DATABASE_URL

logger = logging.getLogger(__name__)

engine = create_engine(DATABASE_URL, echo=False)
SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


def get_session():
    """Return a new database session."""
    return SessionLocal()


@contextmanager
def with_db():
    """Context manager that yields a DB session and auto-closes it.

    Usage::

        with with_db() as db:
            sellers = db.query(Seller).all()
        # session is closed automatically, even on exception
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


METRICS_VIEW = "seller_metrics_view"

# Per-seller aggregates. Quality = share of active listings with model,
# storage and colour all filled in; "recent" = scans from the last 7 days.
_METRICS_VIEW_SQL = f"""
CREATE VIEW IF NOT EXISTS {METRICS_VIEW} AS
SELECT
    s.phone_number AS seller_phone,
    s.name AS seller_name,
    s.city AS city,
    (SELECT COUNT(*) FROM products p
        WHERE p.seller_phone = s.phone_number) AS total_listings_history,
    (SELECT COUNT(*) FROM products p
        WHERE p.seller_phone = s.phone_number AND p.is_active = 1) AS current_active_listings,
    (SELECT COALESCE(
        100.0 * SUM(CASE WHEN p.model_name IS NOT NULL
                          AND p.storage_gb IS NOT NULL
                          AND p.color IS NOT NULL THEN 1 ELSE 0 END)
        / NULLIF(COUNT(*), 0), 0)
        FROM products p
        WHERE p.seller_phone = s.phone_number AND p.is_active = 1) AS catalog_quality_score,
    (SELECT AVG(l.products_found) FROM scan_logs l
        WHERE l.seller_phone = s.phone_number
          AND l.scan_time >= datetime('now', '-7 days')) AS avg_listings_recent,
    (SELECT MAX(l.scan_time) FROM scan_logs l
        WHERE l.seller_phone = s.phone_number) AS last_scan_date
FROM sellers s
"""


def _create_metrics_view():
    """Create the seller metrics view if the database does not have it yet."""
    inspector = inspect(engine)
    if METRICS_VIEW in inspector.get_view_names():
        return
    logger.info("Creating %s", METRICS_VIEW)
    with engine.begin() as conn:
        conn.execute(text(_METRICS_VIEW_SQL))


def drop_metrics_view():
    """Drop the seller metrics view (used before dropping the tables it reads)."""
    with engine.begin() as conn:
        conn.execute(text(f"DROP VIEW IF EXISTS {METRICS_VIEW}"))


def _migrate_indexes():
    """Create indexes on FK and sort columns for existing databases."""
    _indexes = [
        ("ix_products_seller_phone", "products", "seller_phone"),
        ("ix_products_last_seen_at", "products", "last_seen_at"),
        ("ix_product_history_product_id", "product_history", "product_id"),
        ("ix_product_history_recorded_at", "product_history", "recorded_at"),
        ("ix_scan_logs_seller_phone", "scan_logs", "seller_phone"),
        ("ix_scan_logs_scan_time", "scan_logs", "scan_time"),
    ]
    inspector = inspect(engine)
    tables = inspector.get_table_names()
    with engine.begin() as conn:
        for idx_name, table, column in _indexes:
            if table not in tables:
                continue
            existing = {idx["name"] for idx in inspector.get_indexes(table)}
            if idx_name not in existing:
                logger.info("Creating index %s on %s.%s", idx_name, table, column)
                conn.execute(text(
                    f"CREATE INDEX IF NOT EXISTS {idx_name} ON {table} ({column})"
                ))


def init_db():
    """Create all tables, the metrics view and missing indexes."""
    # Import all models so they register with Base.metadata
    import src.models.seller  # noqa: F401
    import src.models.product  # noqa: F401
    import src.models.product_history  # noqa: F401
    import src.models.scan_log  # noqa: F401

    Base.metadata.create_all(bind=engine)
    _create_metrics_view()
    _migrate_indexes()
