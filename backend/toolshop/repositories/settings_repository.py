"""
Settings Repository - site settings, shipping and payment methods

Author: TM3
Date: 2026-10-19
"""
import logging
from typing import List

from toolshop.core.exceptions import NotFoundError
from toolshop.domain.settings import (
    AppSettings,
    FooterSettings,
    GeneralSettings,
    PaymentMethod,
    PaymentMethodCreate,
    ShippingMethod,
    ShippingMethodCreate,
)
from toolshop.repositories.base import timestamp_id

logger = logging.getLogger(__name__)


class SettingsRepository:
    """
    Holds the single AppSettings record

    Every write replaces the record with an updated copy.
    """

    def __init__(self, settings: AppSettings):
        self._settings = settings.model_copy(deep=True)

    def get(self) -> AppSettings:
        return self._settings.model_copy(deep=True)

    def _replace(self, **changes) -> AppSettings:
        self._settings = self._settings.model_copy(update=changes, deep=True)
        return self.get()

    def update_general(self, general: GeneralSettings) -> AppSettings:
        logger.info(f"General settings updated: title={general.title!r}")
        return self._replace(general=general)

    def update_footer(self, footer: FooterSettings) -> AppSettings:
        logger.info("Footer settings updated")
        return self._replace(footer=footer)

    # Shipping methods

    def add_shipping_method(self, data: ShippingMethodCreate) -> ShippingMethod:
        method = ShippingMethod(id=timestamp_id(), **data.model_dump())
        self._replace(shipping_methods=self._settings.shipping_methods + [method])
        logger.info(f"Shipping method created: {method.id}")
        return method

    def update_shipping_method(self, method: ShippingMethod) -> ShippingMethod:
        methods = self._replace_in(self._settings.shipping_methods, method, "Shipping method")
        self._replace(shipping_methods=methods)
        return method

    def delete_shipping_method(self, method_id: int) -> bool:
        methods = [m for m in self._settings.shipping_methods if m.id != method_id]
        removed = len(methods) != len(self._settings.shipping_methods)
        self._replace(shipping_methods=methods)
        return removed

    # Payment methods

    def add_payment_method(self, data: PaymentMethodCreate) -> PaymentMethod:
        method = PaymentMethod(id=timestamp_id(), **data.model_dump())
        self._replace(payment_methods=self._settings.payment_methods + [method])
        logger.info(f"Payment method created: {method.id}")
        return method

    def update_payment_method(self, method: PaymentMethod) -> PaymentMethod:
        methods = self._replace_in(self._settings.payment_methods, method, "Payment method")
        self._replace(payment_methods=methods)
        return method

    def delete_payment_method(self, method_id: int) -> bool:
        methods = [m for m in self._settings.payment_methods if m.id != method_id]
        removed = len(methods) != len(self._settings.payment_methods)
        self._replace(payment_methods=methods)
        return removed

    @staticmethod
    def _replace_in(records: List, record, entity: str) -> List:
        if not any(r.id == record.id for r in records):
            raise NotFoundError(entity, record.id)
        return [record if r.id == record.id else r for r in records]
