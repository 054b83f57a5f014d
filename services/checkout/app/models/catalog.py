from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel


class ProductOut(BaseModel):
    id: int
    name: str
    price: Decimal
