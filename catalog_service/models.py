# catalog_service/models.py

"""
SQLAlchemy database models for the Catalog Service.
"""

from sqlalchemy import Column, Integer, Numeric, String, Text

from .db import Base

# Range of the 32-bit Integer id column.
ID_MIN = -(2**31)
ID_MAX = 2**31 - 1


class Product(Base):
    """
    SQLAlchemy model for the 'products' table.
    The only persistent entity of the catalog; it has no relationships.
    """

    __tablename__ = "products"

    # Assigned once by the database on first insert, never changed afterwards.
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    name = Column(String(255), nullable=False, index=True)

    description = Column(Text, nullable=False)

    # 16 total digits, 4 of them fractional.
    price = Column(Numeric(16, 4), nullable=False)

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"
