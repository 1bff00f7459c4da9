# app/infrastructure/api/schemas/product_schemas.py
from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field

from app.domain.models.product import Product
from .common import CamelModel, PaginationResponse


class ProductCreateRequest(CamelModel):
    model_config = ConfigDict(allow_inf_nan=False)

    code: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: Optional[str] = None
    price: float = Field(ge=0)
    tax_rate: float = Field(default=0.0, ge=0)
    unit: str = Field(min_length=1)
    stock: float = Field(default=0, ge=0)
    category: Optional[str] = None

    def to_domain(self) -> Product:
        return Product(**self.model_dump())


class ProductUpdateRequest(CamelModel):
    model_config = ConfigDict(allow_inf_nan=False)

    code: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    tax_rate: Optional[float] = Field(default=None, ge=0)
    unit: Optional[str] = Field(default=None, min_length=1)
    stock: Optional[float] = Field(default=None, ge=0)
    category: Optional[str] = None
    active: Optional[bool] = None


class ProductResponse(CamelModel):
    id: str = Field(alias="_id")
    code: str
    name: str
    description: Optional[str] = None
    price: float
    tax_rate: float
    unit: str
    stock: float
    category: Optional[str] = None
    active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        return cls.model_validate(product.model_dump())


class ProductListResponse(CamelModel):
    products: List[ProductResponse]
    pagination: PaginationResponse
