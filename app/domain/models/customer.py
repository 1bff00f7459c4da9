# app/domain/models/customer.py
from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class Address(BaseModel):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = "México"


class Customer(BaseModel):
    """Cliente al que se le emiten facturas."""
    id: Optional[str] = None
    tax_id: str
    name: str
    email: str
    phone: Optional[str] = None
    address: Address = Address()
    active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class CustomerFilter(BaseModel):
    active: Optional[bool] = None
    search: Optional[str] = None
