"""Searchable fields for each listing type.

Each function returns the strings the search box matches against, OR-ed
together. Missing values may be returned as ``None``; the filter treats them
as empty.
"""


def status_label(is_active) -> str:
    return "active" if is_active else "inactive"


def seller_search_fields(seller) -> list:
    return [
        seller.phone_number,
        seller.name,
        seller.city,
        status_label(seller.is_active),
    ]


def product_search_fields(product) -> list:
    seller = product.seller
    return [
        product.id,
        product.raw_name,
        product.raw_description,
        product.model_name,
        product.storage_gb,
        product.color,
        seller.name if seller else None,
        seller.phone_number if seller else product.seller_phone,
    ]


def product_history_search_fields(entry) -> list:
    product = entry.product
    seller = product.seller if product else None
    return [
        product.raw_name if product else None,
        seller.name if seller else None,
        seller.phone_number if seller else None,
        entry.change_type,
        entry.availability,
    ]


def scan_log_search_fields(log) -> list:
    seller = log.seller
    return [
        log.seller_phone,
        seller.name if seller else None,
        seller.city if seller else None,
        log.status,
        log.error_message,
    ]


def seller_metric_search_fields(metric) -> list:
    return [
        metric.seller_phone,
        metric.seller_name,
        metric.city,
        str(metric.total_listings_history),
        str(metric.current_active_listings),
        str(metric.catalog_quality_score),
    ]
