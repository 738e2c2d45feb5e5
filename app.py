"""Seller Scan Dashboard - Main entry point."""
import logging

from nicegui import app, ui

from config import APP_TITLE, APP_PORT, APP_HOST, LOG_FORMAT, log_level
from src.models import init_db
from src.ui.pages.sellers import sellers_page
from src.ui.pages.products import products_page
from src.ui.pages.product_history import product_history_page
from src.ui.pages.scan_logs import scan_logs_page
from src.ui.pages.metrics import metrics_page

logging.basicConfig(level=log_level(), format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# Create tables and the metrics view on startup
init_db()


@ui.page("/")
def index():
    ui.navigate.to("/sellers")


@ui.page("/sellers")
def sellers_view():
    sellers_page()


@ui.page("/products")
def products_view():
    products_page()


@ui.page("/product-history")
def product_history_view():
    product_history_page()


@ui.page("/scan-logs")
def scan_logs_view():
    scan_logs_page()


@ui.page("/metrics")
def metrics_view():
    metrics_page()


@app.get("/_health")
async def health_check():
    return {"status": "ok", "app": "seller-scan-dashboard"}


logger.info("Starting %s on %s:%d", APP_TITLE, APP_HOST, APP_PORT)

ui.run(
    title=APP_TITLE,
    host=APP_HOST,
    port=APP_PORT,
    reload=False,
    dark=False,
)
