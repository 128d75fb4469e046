# catalog_service/repository.py

"""
Product store on top of a SQLAlchemy session.
Writes commit immediately; on failure the session is rolled back and the
original exception propagates to the caller, which logs it.
"""
from typing import Optional

from sqlalchemy.orm import Session

from .models import ID_MAX, ID_MIN, Product
from .paging import DESC, Page, PageSpec


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def save(self, product: Product) -> Product:
        """Insert or update `product`; a new product gets its id here."""
        try:
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
            return product
        except Exception:
            self.db.rollback()
            raise

    def find_by_id(self, product_id: int) -> Optional[Product]:
        # ids outside the column range can never be stored
        if not ID_MIN <= product_id <= ID_MAX:
            return None
        return self.db.get(Product, product_id)

    def find_all(self, predicate, page_spec: PageSpec) -> Page[Product]:
        query = self.db.query(Product).filter(predicate)
        total = query.count()

        # past the last row: nothing to fetch, and the offset may not fit the database
        if page_spec.offset >= total:
            return Page([], page_spec.page, page_spec.size, total)

        order_by = []
        for key in page_spec.sort:
            column = getattr(Product, key.field)
            order_by.append(column.desc() if key.direction == DESC else column.asc())

        products = query.order_by(*order_by).offset(page_spec.offset).limit(page_spec.size).all()
        return Page(products, page_spec.page, page_spec.size, total)

    def delete_by_id(self, product_id: int) -> None:
        try:
            self.db.query(Product).filter(Product.id == product_id).delete(synchronize_session="fetch")
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
