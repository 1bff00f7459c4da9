# app/domain/models/common.py
import math
from pydantic import BaseModel


class Pagination(BaseModel):
    total: int
    page: int
    limit: int
    pages: int


def page_to_skip(page: int, limit: int) -> int:
    """Las páginas que ve el usuario empiezan en 1."""
    return (page - 1) * limit


def build_pagination(total: int, page: int, limit: int) -> Pagination:
    return Pagination(
        total=total,
        page=page,
        limit=limit,
        pages=math.ceil(total / limit) if limit else 0
    )
