"""
Repository Layer - Data Access

This layer owns the in-memory collections and returns domain models.
Repositories abstract collection handling away from business logic.

Author: TM3
Date: 2026-10-19
"""
from toolshop.repositories.product_repository import ProductRepository
from toolshop.repositories.category_repository import CategoryRepository
from toolshop.repositories.menu_repository import MenuRepository
from toolshop.repositories.order_repository import OrderRepository
from toolshop.repositories.settings_repository import SettingsRepository

__all__ = [
    'ProductRepository',
    'CategoryRepository',
    'MenuRepository',
    'OrderRepository',
    'SettingsRepository',
]
