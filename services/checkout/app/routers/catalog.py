from __future__ import annotations

from fastapi import APIRouter, Depends
from services.checkout.app.db.deps import get_db
from services.checkout.app.db.models import Product
from services.checkout.app.models.catalog import ProductOut
from sqlalchemy.orm import Session

router = APIRouter()


@router.get("/v1/products", response_model=list[ProductOut])
def list_products(db: Session = Depends(get_db)) -> list[ProductOut]:
    rows = db.query(Product).order_by(Product.id).all()
    return [ProductOut(id=p.id, name=p.name, price=p.price) for p in rows]
