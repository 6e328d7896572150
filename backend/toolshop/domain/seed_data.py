"""
Storefront Seed Data
Initial state loaded into the in-memory store on startup

Every mutation lives only as long as the process; a restart goes back
to exactly this data.

Author: TM3
Date: 2026-10-19
"""
from decimal import Decimal
from typing import List

from toolshop.domain.category import Category
from toolshop.domain.menu import Menu, MenuItem, PageLink
from toolshop.domain.order import Order, OrderLine, OrderStatus
from toolshop.domain.product import Product, ProductPrices
from toolshop.domain.settings import (
    AppSettings,
    FooterSettings,
    GeneralSettings,
    PaymentMethod,
    ShippingMethod,
)
from toolshop.domain.user import User


def _placeholder(text: str) -> str:
    return f"https://placehold.co/400x400/f59e0b/white?text={text}"


# ================================================================================
# PRODUCTS
# ================================================================================

def seed_products() -> List[Product]:
    return [
        Product(
            id=1,
            name="Ronix Cordless Hammer Drill",
            sku="RNX-8612",
            image=_placeholder("Drill"),
            gallery=[_placeholder("Drill"), _placeholder("Drill+View+2")],
            stock=50,
            prices=ProductPrices(retail=Decimal("2500000"), wholesale=Decimal("2200000")),
            category="Cordless Tools",
            description="12V cordless drill with hammer mode for home and light industrial work.",
        ),
        Product(
            id=2,
            name="Tosan Mini Grinder",
            sku="TSN-3382A",
            image=_placeholder("Grinder"),
            gallery=[_placeholder("Grinder")],
            stock=35,
            prices=ProductPrices(retail=Decimal("1800000"), wholesale=Decimal("1650000")),
            category="Power Tools",
            description="850W angle grinder running at 11000 rpm.",
        ),
        Product(
            id=3,
            name="Nova 24-Piece Socket Set",
            sku="NVA-1234",
            image=_placeholder("Socket+Set"),
            gallery=[_placeholder("Socket+Set")],
            stock=80,
            prices=ProductPrices(retail=Decimal("1200000"), wholesale=Decimal("1050000")),
            category="Hand Tools",
            description="Full 1/2 inch drive socket set in chrome vanadium steel.",
        ),
        Product(
            id=4,
            name="50m Laser Distance Meter",
            sku="LSR-50M",
            image=_placeholder("Laser+Meter"),
            gallery=[_placeholder("Laser+Meter")],
            stock=15,
            prices=ProductPrices(retail=Decimal("950000"), wholesale=Decimal("880000")),
            category="Measuring Tools",
            description="Accurate laser meter with 50m range plus area and volume modes.",
        ),
        Product(
            id=5,
            name="Iran Potk Locking Pliers",
            sku="IP-10",
            image=_placeholder("Pliers"),
            gallery=[_placeholder("Pliers")],
            stock=120,
            prices=ProductPrices(retail=Decimal("350000"), wholesale=Decimal("310000")),
            category="Hand Tools",
            description="10 inch locking pliers with hardened jaws.",
        ),
        Product(
            id=6,
            name="Xiaomi Cordless Screwdriver",
            sku="XI-SCD-24",
            image=_placeholder("Screwdriver"),
            gallery=[_placeholder("Screwdriver")],
            stock=60,
            prices=ProductPrices(retail=Decimal("1500000"), wholesale=Decimal("1350000")),
            category="Cordless Tools",
            description="Cordless screwdriver kit with 24 bits and an ergonomic grip.",
        ),
    ]


# ================================================================================
# USERS & ORDERS
# ================================================================================

DEMO_USER = User(id=1, mobile="09123456789", name="Ali Mohammadi")


def seed_orders() -> List[Order]:
    return [
        Order(
            id="ABC-123",
            date="1403/04/10",
            items=[
                OrderLine(product_name="Ronix Cordless Hammer Drill", quantity=1, price=Decimal("2200000")),
                OrderLine(product_name="Iran Potk Locking Pliers", quantity=2, price=Decimal("310000")),
            ],
            total=Decimal("2820000"),
            status=OrderStatus.DELIVERED,
        ),
        Order(
            id="DEF-456",
            date="1403/05/02",
            items=[
                OrderLine(product_name="Tosan Mini Grinder", quantity=1, price=Decimal("1650000")),
            ],
            total=Decimal("1650000"),
            status=OrderStatus.SHIPPED,
        ),
    ]


# ================================================================================
# CATEGORIES & MENUS
# ================================================================================

def seed_categories() -> List[Category]:
    return [
        Category(id=1, name="Power Tools", slug="electric-tools", parent_id=None),
        Category(id=2, name="Cordless Tools", slug="cordless-tools", parent_id=None),
        Category(id=3, name="Hand Tools", slug="hand-tools", parent_id=None),
        Category(id=4, name="Drills", slug="drills", parent_id=1),
        Category(id=5, name="Grinders", slug="grinders", parent_id=1),
        Category(id=6, name="Pliers", slug="pliers", parent_id=3),
    ]


def seed_menus() -> List[Menu]:
    return [Menu(id=1, name="Main Menu", location="header")]


def seed_menu_items() -> List[MenuItem]:
    return [
        MenuItem(id=1, menu_id=1, title="Home", type="page", value="home", parent_id=None, order=1),
        MenuItem(id=2, menu_id=1, title="Products", type="page", value="products", parent_id=None, order=2),
        MenuItem(id=3, menu_id=1, title="Power Tools", type="category", value="electric-tools", parent_id=2, order=1),
        MenuItem(id=4, menu_id=1, title="Price List", type="page", value="productList", parent_id=None, order=3),
    ]


AVAILABLE_PAGES: List[PageLink] = [
    PageLink(view="home", title="Home"),
    PageLink(view="products", title="Shop"),
    PageLink(view="productList", title="Quick Price List"),
    PageLink(view="cart", title="Cart"),
    PageLink(view="dashboard", title="Dashboard"),
]


# ================================================================================
# SETTINGS
# ================================================================================

def seed_settings() -> AppSettings:
    return AppSettings(
        general=GeneralSettings(
            title="Online Tool Shop",
            description="A fast, modern online store for professional and home tools.",
            icon="",
            favicon="",
        ),
        footer=FooterSettings(
            about_us="Genuine industrial and household tools at fair prices, delivered quickly nationwide.",
            enamad_link="#",
            samandehi_link="#",
            copyright_text="(c) 1403 - All rights reserved by Online Tool Shop.",
        ),
        shipping_methods=[
            ShippingMethod(id=1, name="Express Post", cost=Decimal("35000")),
            ShippingMethod(id=2, name="Tipax", cost=Decimal("55000")),
            ShippingMethod(id=3, name="Motor Courier (Tehran)", cost=Decimal("40000")),
        ],
        payment_methods=[
            PaymentMethod(id=1, name="Online Payment", description="Secure payment through the bank gateway"),
            PaymentMethod(id=2, name="Card to Card", description="Transfer to the announced card number"),
        ],
    )
