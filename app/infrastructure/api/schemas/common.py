# app/infrastructure/api/schemas/common.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base de los esquemas de la API: en JSON los campos van en camelCase
    (invoiceNumber, unitPrice...) y en Python en snake_case.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,  # Permite crear el modelo con los nombres de Python
    )


class PaginationResponse(CamelModel):
    total: int
    page: int
    limit: int
    pages: int


class MessageResponse(CamelModel):
    message: str
