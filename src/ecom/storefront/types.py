"""Typed shapes of the JSON the storefront reads from the store API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class Billboard(ApiModel):
    id: str
    label: str
    image_url: str


class Category(ApiModel):
    id: str
    name: str
    billboard: Billboard


class Size(ApiModel):
    id: str
    name: str
    value: str


class Color(ApiModel):
    id: str
    name: str
    value: str


class Image(ApiModel):
    id: str
    url: str


class Product(ApiModel):
    id: str
    category: Category
    name: str
    price: str
    is_featured: bool
    size: Size
    color: Color
    images: list[Image]
