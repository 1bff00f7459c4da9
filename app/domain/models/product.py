# app/domain/models/product.py
from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class Product(BaseModel):
    id: Optional[str] = None
    code: str
    name: str
    description: Optional[str] = None
    price: float
    tax_rate: float = 0.0
    unit: str
    stock: float = 0
    category: Optional[str] = None
    active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ProductFilter(BaseModel):
    active: Optional[bool] = None
    category: Optional[str] = None
    search: Optional[str] = None
