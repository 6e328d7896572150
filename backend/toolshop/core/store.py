"""
Application state holder

ShopStore owns every collection plus the cart and the session, and its
methods are the only write path. One instance lives on the FastAPI app;
routers receive it through the `get_store` dependency.

Author: TM3
Date: 2026-10-19
"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from fastapi import Request

from toolshop.core.config import Settings, settings as default_settings
from toolshop.core.exceptions import HierarchyCycleError, InvalidParentError, NotFoundError
from toolshop.domain import seed_data
from toolshop.domain.cart import CartItem, CartLine
from toolshop.domain.category import Category, CategoryCreate
from toolshop.domain.menu import MenuItem, PageLink
from toolshop.domain.order import Order, OrderStatus
from toolshop.domain.product import PriceTier, Product, ProductCreate
from toolshop.domain.settings import (
    AppSettings,
    FooterSettings,
    GeneralSettings,
    PageMeta,
    PaymentMethod,
    PaymentMethodCreate,
    ShippingMethod,
    ShippingMethodCreate,
)
from toolshop.domain.user import User
from toolshop.repositories import (
    CategoryRepository,
    MenuRepository,
    OrderRepository,
    ProductRepository,
    SettingsRepository,
)
from toolshop.services.auth_service import AuthService
from toolshop.services.cart_service import Cart, cart_lines, cart_total
from toolshop.services.hierarchy_service import (
    HierarchyEntry,
    TreeNode,
    build_hierarchy,
    would_create_cycle,
)
from toolshop.services.menu_service import MenuEditor, header_menu_tree

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """State of the single storefront visitor"""
    user: Optional[User] = None
    is_admin: bool = False
    price_tier: PriceTier = PriceTier.RETAIL
    recently_viewed: List[int] = field(default_factory=list)
    selected_product_id: Optional[int] = None
    category_filter: str = "all"


class ShopStore:
    """
    The storefront's single store

    Collections:
        products, categories, menus (with items), orders, settings

    Session:
        cart, signed-in user, admin flag, price tier, recently viewed
    """

    def __init__(
        self,
        products: ProductRepository,
        categories: CategoryRepository,
        menus: MenuRepository,
        orders: OrderRepository,
        settings: SettingsRepository,
        available_pages: Optional[List[PageLink]] = None,
        config: Settings = default_settings,
    ):
        self.products = products
        self.categories = categories
        self.menus = menus
        self.orders = orders
        self.settings = settings
        self.available_pages = list(available_pages or [])
        self.config = config
        self.auth = AuthService(config)
        self.cart = Cart()
        self.session = Session()
        self.menu_editor: Optional[MenuEditor] = None

    @classmethod
    def from_seed(cls, config: Settings = default_settings) -> "ShopStore":
        """Fresh store loaded with the seed data"""
        return cls(
            products=ProductRepository(seed_data.seed_products()),
            categories=CategoryRepository(seed_data.seed_categories()),
            menus=MenuRepository(seed_data.seed_menus(), seed_data.seed_menu_items()),
            orders=OrderRepository(seed_data.seed_orders()),
            settings=SettingsRepository(seed_data.seed_settings()),
            available_pages=seed_data.AVAILABLE_PAGES,
            config=config,
        )

    # ==========================================================================
    # Products
    # ==========================================================================

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        return self.products.find_by_id(product_id)

    def require_product(self, product_id: int) -> Product:
        product = self.products.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    def add_product(self, data: ProductCreate) -> Product:
        return self.products.add(data)

    def update_product(self, product: Product) -> Product:
        return self.products.update(product)

    def delete_product(self, product_id: int) -> bool:
        """Delete a product; cart entries pointing at it are left in place"""
        return self.products.delete(product_id)

    def view_product(self, product_id: int) -> Product:
        """Select a product and push it to the front of recently viewed"""
        product = self.require_product(product_id)
        history = [product_id] + [pid for pid in self.session.recently_viewed if pid != product_id]
        self.session.recently_viewed = history[:self.config.RECENTLY_VIEWED_LIMIT]
        self.session.selected_product_id = product_id
        return product

    def recently_viewed_products(self) -> List[Product]:
        products = self.products.index_by_id()
        return [products[pid] for pid in self.session.recently_viewed if pid in products]

    def set_category_filter(self, category: str) -> None:
        self.session.category_filter = category or "all"

    # ==========================================================================
    # Cart & pricing
    # ==========================================================================

    @property
    def effective_price_tier(self) -> PriceTier:
        """Visitors who are not signed in always see retail prices"""
        if self.session.user is None:
            return PriceTier.RETAIL
        return self.session.price_tier

    def set_price_tier(self, tier: PriceTier) -> None:
        self.session.price_tier = PriceTier(tier)
        logger.info(f"Price tier set to {self.session.price_tier.value}")

    def add_to_cart(self, product_id: int, quantity: int = 1) -> CartItem:
        return self.cart.add(product_id, quantity)

    def update_cart_quantity(self, product_id: int, quantity: int) -> Optional[CartItem]:
        return self.cart.update_quantity(product_id, quantity)

    def remove_from_cart(self, product_id: int) -> None:
        self.cart.remove(product_id)

    def clear_cart(self) -> None:
        self.cart.clear()

    def get_cart_lines(self) -> List[CartLine]:
        return cart_lines(self.cart.items, self.products.index_by_id(), self.effective_price_tier)

    def get_cart_total(self) -> Decimal:
        return cart_total(self.cart.items, self.products.index_by_id(), self.effective_price_tier)

    # ==========================================================================
    # Session
    # ==========================================================================

    def login(self, mobile: str) -> User:
        """
        Customer login; any well-formed mobile number signs in the demo user

        Raises:
            InvalidMobileNumberError: malformed number
        """
        self.auth.validate_mobile(mobile)
        self.session.user = seed_data.DEMO_USER.model_copy()
        logger.info(f"Customer signed in: {self.session.user.id}")
        return self.session.user

    def admin_login(self, username: str, password: str) -> bool:
        if not self.auth.check_admin_credentials(username, password):
            return False
        self.session.is_admin = True
        if self.session.user is None:
            self.session.user = seed_data.DEMO_USER.model_copy()
        logger.info("Admin signed in")
        return True

    def logout(self) -> None:
        self.session.user = None
        self.session.is_admin = False
        self.session.price_tier = PriceTier.RETAIL
        logger.info("Signed out")

    # ==========================================================================
    # Orders
    # ==========================================================================

    def update_order_status(self, order_id: str, status: OrderStatus) -> Order:
        return self.orders.update_status(order_id, status)

    # ==========================================================================
    # Categories
    # ==========================================================================

    def _check_category_parent(self, category_id: Optional[int], parent_id: Optional[int]) -> None:
        if parent_id is None:
            return
        categories = self.categories.find_all()
        if not any(c.id == parent_id for c in categories):
            raise InvalidParentError("Category", parent_id)
        if category_id is not None and would_create_cycle(categories, category_id, parent_id):
            raise HierarchyCycleError(category_id, parent_id)

    def add_category(self, data: CategoryCreate) -> Category:
        self._check_category_parent(None, data.parent_id)
        return self.categories.add(data)

    def update_category(self, category: Category) -> Category:
        """
        Replace a category record

        Raises:
            NotFoundError: unknown category
            InvalidParentError: parent_id does not resolve
            HierarchyCycleError: parent_id is the category itself or a descendant
        """
        if self.categories.find_by_id(category.id) is None:
            raise NotFoundError("Category", category.id)
        self._check_category_parent(category.id, category.parent_id)
        return self.categories.update(category)

    def delete_category(self, category_id: int) -> bool:
        """Delete a category and its direct children (not grandchildren)"""
        return self.categories.delete(category_id)

    def category_hierarchy(self) -> List[HierarchyEntry[Category]]:
        return build_hierarchy(self.categories.find_all())

    # ==========================================================================
    # Menus
    # ==========================================================================

    def update_menu_items(self, menu_id: int, items: List[MenuItem]) -> List[MenuItem]:
        return self.menus.replace_items(menu_id, items)

    def open_menu_editor(self, menu_id: int) -> MenuEditor:
        """Start a working copy for a menu, replacing any unsaved one"""
        self.menu_editor = MenuEditor(self.menus, menu_id)
        return self.menu_editor

    def require_menu_editor(self) -> MenuEditor:
        if self.menu_editor is None:
            raise NotFoundError("Menu editor", "no open working copy")
        return self.menu_editor

    def header_menu(self) -> List[TreeNode[MenuItem]]:
        return header_menu_tree(self.menus)

    # ==========================================================================
    # Settings
    # ==========================================================================

    def get_settings(self) -> AppSettings:
        return self.settings.get()

    @property
    def page_meta(self) -> PageMeta:
        """Document title, meta description and favicon for the current settings"""
        return self.settings.get().page_meta()

    def update_general_settings(self, data: GeneralSettings) -> AppSettings:
        updated = self.settings.update_general(data)
        logger.info(f"Page metadata now titled {updated.general.title!r}")
        return updated

    def update_footer_settings(self, data: FooterSettings) -> AppSettings:
        return self.settings.update_footer(data)

    def add_shipping_method(self, data: ShippingMethodCreate) -> ShippingMethod:
        return self.settings.add_shipping_method(data)

    def update_shipping_method(self, method: ShippingMethod) -> ShippingMethod:
        return self.settings.update_shipping_method(method)

    def delete_shipping_method(self, method_id: int) -> bool:
        return self.settings.delete_shipping_method(method_id)

    def add_payment_method(self, data: PaymentMethodCreate) -> PaymentMethod:
        return self.settings.add_payment_method(data)

    def update_payment_method(self, method: PaymentMethod) -> PaymentMethod:
        return self.settings.update_payment_method(method)

    def delete_payment_method(self, method_id: int) -> bool:
        return self.settings.delete_payment_method(method_id)


def get_store(request: Request) -> ShopStore:
    """
    FastAPI dependency for the application store

    Usage:
        @router.get("/items")
        def read_items(store: ShopStore = Depends(get_store)):
            ...
    """
    return request.app.state.store
