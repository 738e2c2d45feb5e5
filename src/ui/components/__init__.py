"""Reusable UI components."""
from src.ui.components.card_grid import card_grid
from src.ui.components.data_table import Column, data_table
from src.ui.components.listing_view import listing_view
from src.ui.components.pagination import PaginationBar

__all__ = ["card_grid", "Column", "data_table", "listing_view", "PaginationBar"]
