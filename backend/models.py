"""Pydantic wire models for the product catalog API.

Field names are lower-camel-case on the wire.
"""

import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from services.catalog import Product


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class CategoryModel(CamelModel):
    """Product category"""
    id: int
    name: str


class ProductModel(CamelModel):
    """Product with its category embedded"""
    id: int
    name: str
    price: Decimal
    stock: int
    category: CategoryModel

    @field_serializer("price", when_used="json")
    def _price_as_number(self, price: Decimal) -> float:
        return float(price)

    @classmethod
    def from_product(cls, product: Product) -> "ProductModel":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            stock=product.stock,
            category=CategoryModel(id=product.category.id, name=product.category.name),
        )


class WeatherForecastModel(CamelModel):
    """One day of the sample forecast"""
    date: datetime.date
    temperature_c: int
    temperature_f: int
    summary: str | None = None

    @classmethod
    def build(cls, day: datetime.date, temperature_c: int, summary: str | None) -> "WeatherForecastModel":
        return cls(
            date=day,
            temperature_c=temperature_c,
            temperature_f=32 + int(temperature_c / 0.5556),
            summary=summary,
        )


class ErrorResponse(BaseModel):
    """Model for error responses"""
    error: str
    detail: str | None = None
