# catalog_service/service.py

"""
Product Service: orchestrates create, read, search, partial update and
delete on top of the product store.

`NotFoundError` is the only error raised here. Input is assumed valid, it is
checked by the request schemas before any operation runs.
"""
import logging
from typing import Optional

from .criteria import build_criteria
from .exceptions import NotFoundError
from .mapper import merge_update, to_entity, to_response
from .models import Product
from .paging import PageSpec
from .repository import ProductRepository
from .schemas import ProductCreate, ProductPage, ProductResponse, ProductSearch, ProductUpdate

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def create(self, request: ProductCreate) -> ProductResponse:
        logger.info("Creating a new product.")
        logger.debug(f"Create request: {request}")
        product = self.repository.save(to_entity(request))
        logger.info(f"Product '{product.name}' saved with generated ID: {product.id}")
        return to_response(product)

    def _get(self, product_id: int) -> Product:
        logger.debug(f"Looking up product ID: {product_id}")
        product = self.repository.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    def get_by_id(self, product_id: int) -> ProductResponse:
        return to_response(self._get(product_id))

    def search(self, criteria: Optional[ProductSearch], page_spec: PageSpec) -> ProductPage:
        logger.info("Searching products.")
        logger.debug(f"Search criteria: {criteria}, page spec: {page_spec}")
        page = self.repository.find_all(build_criteria(criteria), page_spec)
        logger.info(
            f"Product search finished. Page {page.page + 1} of {page.total_pages}, "
            f"total elements: {page.total_elements}"
        )
        page = page.map(to_response)
        return ProductPage(
            content=page.content,
            page=page.page,
            size=page.size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            first=page.first,
            last=page.last,
        )

    def update(self, product_id: int, request: ProductUpdate) -> ProductResponse:
        logger.info(f"Updating product ID: {product_id}")
        logger.debug(f"Update request for product ID {product_id}: {request}")
        product = merge_update(request, self._get(product_id))
        product = self.repository.save(product)
        logger.info(f"Product ID {product.id} updated successfully.")
        return to_response(product)

    def delete(self, product_id: int) -> None:
        logger.info(f"Deleting product ID: {product_id}")
        product = self._get(product_id)
        self.repository.delete_by_id(product.id)
        logger.info(f"Product ID {product_id} deleted successfully.")
