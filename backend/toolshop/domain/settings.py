"""
Site Settings Domain Models

General site identity, footer content and the shipping/payment
methods offered at checkout.

Author: TM3
Date: 2026-10-19
"""
from pydantic import BaseModel, Field
from typing import List
from decimal import Decimal


class GeneralSettings(BaseModel):
    """Site identity; drives the page title and meta description"""
    title: str = Field(..., description="Site title")
    description: str = Field("", description="Meta description")
    icon: str = Field("", description="Logo reference (URL or data URL)")
    favicon: str = Field("", description="Favicon reference (URL or data URL)")


class FooterSettings(BaseModel):
    about_us: str = ""
    enamad_link: str = "#"
    samandehi_link: str = "#"
    copyright_text: str = ""


class ShippingMethod(BaseModel):
    id: int
    name: str
    cost: Decimal = Field(..., ge=0)


class ShippingMethodCreate(BaseModel):
    name: str
    cost: Decimal = Field(..., ge=0)


class PaymentMethod(BaseModel):
    id: int
    name: str
    description: str = ""


class PaymentMethodCreate(BaseModel):
    name: str
    description: str = ""


class PageMeta(BaseModel):
    """Document-level metadata synchronised from GeneralSettings"""
    title: str
    description: str
    favicon: str


class AppSettings(BaseModel):
    """All site settings"""
    general: GeneralSettings
    footer: FooterSettings
    shipping_methods: List[ShippingMethod] = Field(default_factory=list)
    payment_methods: List[PaymentMethod] = Field(default_factory=list)

    def page_meta(self) -> PageMeta:
        return PageMeta(
            title=self.general.title,
            description=self.general.description,
            favicon=self.general.favicon,
        )

    def to_dict(self) -> dict:
        data = self.model_dump(mode='json')
        for method, raw in zip(data['shipping_methods'], self.shipping_methods):
            method['cost'] = float(raw.cost)
        return data
