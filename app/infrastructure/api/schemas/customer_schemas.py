# app/infrastructure/api/schemas/customer_schemas.py
from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, Field

from app.domain.models.customer import Address, Customer
from .common import CamelModel, PaginationResponse


class AddressSchema(CamelModel):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class CustomerCreateRequest(CamelModel):
    tax_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    address: Optional[AddressSchema] = None

    def to_domain(self) -> Customer:
        address = Address()
        if self.address:
            address = address.model_copy(update=self.address.model_dump(exclude_none=True))
        return Customer(
            tax_id=self.tax_id.strip(),
            name=self.name.strip(),
            email=self.email,
            phone=self.phone,
            address=address,
        )


class CustomerUpdateRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[AddressSchema] = None
    active: Optional[bool] = None

    def to_changes(self) -> dict:
        changes = self.model_dump(exclude_unset=True, exclude={"address"})
        if self.address is not None:
            changes["address"] = self.address.model_dump(exclude_unset=True)
        return changes


class CustomerResponse(CamelModel):
    id: str = Field(alias="_id")
    tax_id: str
    name: str
    email: str
    phone: Optional[str] = None
    address: AddressSchema
    active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerResponse":
        return cls.model_validate(customer.model_dump())


class CustomerListResponse(CamelModel):
    customers: List[CustomerResponse]
    pagination: PaginationResponse
