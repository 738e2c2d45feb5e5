import os

# Point the app at a private in-memory database before anything imports config
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import datetime, timedelta

import pytest

from src.models.database import Base, SessionLocal, drop_metrics_view, engine, init_db
from src.models.product import Product
from src.models.product_history import ProductHistory
from src.models.scan_log import ScanLog
from src.models.seller import Seller


@pytest.fixture
def db():
    init_db()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        drop_metrics_view()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def seeded_db(db):
    now = datetime.utcnow()
    ana = Seller(phone_number="+51911111111", name="Ana Phones", city="Lima",
                 is_active=True, created_at=now - timedelta(days=10))
    beto = Seller(phone_number="+51922222222", name=None, city="Cusco",
                  is_active=False, created_at=now - timedelta(days=2))
    db.add_all([ana, beto])
    db.flush()

    iphone = Product(id="aaaaaaaa-0000-0000-0000-000000000001", seller_phone=ana.phone_number,
                     raw_name="iPhone 13 128GB Azul", model_name="iPhone 13", storage_gb="128GB",
                     color="Azul", price=2500.0, currency="PEN", is_active=True,
                     last_seen_at=now - timedelta(hours=1))
    galaxy = Product(id="bbbbbbbb-0000-0000-0000-000000000002", seller_phone=ana.phone_number,
                     raw_name="Galaxy S21", model_name="Galaxy S21", storage_gb=None,
                     color=None, is_active=False, last_seen_at=now - timedelta(days=3))
    moto = Product(id="cccccccc-0000-0000-0000-000000000003", seller_phone=beto.phone_number,
                   raw_name="Moto G", is_active=True, last_seen_at=now)
    db.add_all([iphone, galaxy, moto])
    db.flush()

    db.add_all([
        ProductHistory(product_id=iphone.id, change_type="created", price=2600.0,
                       currency="PEN", recorded_at=now - timedelta(days=5)),
        ProductHistory(product_id=iphone.id, change_type="price_change", price=2500.0,
                       currency="PEN", recorded_at=now - timedelta(days=1)),
        ScanLog(seller_phone=ana.phone_number, scan_time=now - timedelta(days=1),
                status="success", products_found=4),
        ScanLog(seller_phone=ana.phone_number, scan_time=now - timedelta(hours=2),
                status="success", products_found=6),
        ScanLog(seller_phone=ana.phone_number, scan_time=now - timedelta(days=30),
                status="failed", products_found=100, error_message="timeout"),
    ])
    db.commit()
    return db
