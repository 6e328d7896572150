"""
Domain Layer - Business Entities

This layer contains Pydantic models representing storefront entities.
These models enforce type safety and validation across the application.

Author: TM3
Date: 2026-10-19
"""
from toolshop.domain.product import Product, ProductCreate, ProductPrices, PriceTier
from toolshop.domain.category import Category, CategoryCreate
from toolshop.domain.menu import Menu, MenuItem, MenuItemCreate, PageLink
from toolshop.domain.order import Order, OrderLine, OrderStatus
from toolshop.domain.cart import CartItem, CartLine
from toolshop.domain.user import User
from toolshop.domain.settings import (
    AppSettings,
    FooterSettings,
    GeneralSettings,
    PageMeta,
    PaymentMethod,
    ShippingMethod,
)

__all__ = [
    'Product', 'ProductCreate', 'ProductPrices', 'PriceTier',
    'Category', 'CategoryCreate',
    'Menu', 'MenuItem', 'MenuItemCreate', 'PageLink',
    'Order', 'OrderLine', 'OrderStatus',
    'CartItem', 'CartLine',
    'User',
    'AppSettings', 'FooterSettings', 'GeneralSettings', 'PageMeta',
    'PaymentMethod', 'ShippingMethod',
]
