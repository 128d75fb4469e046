# catalog_service/main.py

"""
FastAPI Catalog Service API.
Manages the product catalog: creation, retrieval, criteria search with
pagination and sorting, partial updates and deletion. Also exposes the
factory test endpoints that simulate starting a car with a configured engine.
"""
import logging
import sys
import time
from decimal import Decimal
from typing import List, Optional

from fastapi import Depends, FastAPI, Query, Response, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from . import __version__
from .config import (
    CORS_ALLOW_ORIGINS,
    DB_CONNECT_MAX_RETRIES,
    DB_CONNECT_RETRY_DELAY_SECONDS,
    DEFAULT_ENGINE,
    DEFAULT_PAGE_SIZE,
    LOG_LEVEL,
    MAX_PAGE_SIZE,
)
from .db import get_db, init_db
from .errors import register_exception_handlers
from .ignition import ENGINES, EngineVariant, start_car
from .paging import PageSpec, parse_sort
from .repository import ProductRepository
from .schemas import (
    EngineResponse,
    IgnitionKey,
    IgnitionResult,
    ProductCreate,
    ProductPage,
    ProductResponse,
    ProductSearch,
    ProductUpdate,
)
from .service import ProductService

# -----------------------------
# Configure Logging
# -----------------------------
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Suppress noisy logs from third-party libraries for cleaner output
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.INFO)


# -----------------------------
# FastAPI App Initialization
# -----------------------------
app = FastAPI(
    title="Catalog Service API",
    description="Manages the product catalog and runs factory ignition tests",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


# --- FastAPI Event Handlers ---
@app.on_event("startup")
async def startup_event():
    """
    Ensures database tables are created (if not exist).
    Retries while the database is unreachable and exits if it never comes up.
    """
    for i in range(DB_CONNECT_MAX_RETRIES):
        try:
            logger.info(
                f"Attempting to connect to the database and create tables (attempt {i+1}/{DB_CONNECT_MAX_RETRIES})..."
            )
            init_db()
            logger.info("Successfully connected to the database and ensured tables exist.")
            break
        except OperationalError as e:
            logger.warning(f"Failed to connect to the database: {e}")
            if i < DB_CONNECT_MAX_RETRIES - 1:
                logger.info(f"Retrying in {DB_CONNECT_RETRY_DELAY_SECONDS} seconds...")
                time.sleep(DB_CONNECT_RETRY_DELAY_SECONDS)
            else:
                logger.critical(
                    f"Failed to connect to the database after {DB_CONNECT_MAX_RETRIES} attempts. Exiting application."
                )
                sys.exit(1)
        except Exception as e:
            logger.critical(
                f"An unexpected error occurred during database startup: {e}",
                exc_info=True,
            )
            sys.exit(1)


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(ProductRepository(db))


# --- Root Endpoint ---
@app.get("/", status_code=status.HTTP_200_OK, summary="Root endpoint")
async def read_root():
    """
    Returns a welcome message for the Catalog Service.
    """
    return {"message": "Welcome to the Catalog Service!"}


# --- Health Check Endpoint ---
@app.get("/health", status_code=status.HTTP_200_OK, summary="Health check endpoint")
async def health_check():
    """
    Returns 200 OK if the service is alive.
    """
    return {"status": "ok", "service": "catalog-service"}


# -----------------------------
# Product Endpoints
# -----------------------------


@app.post(
    "/products/",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
)
def create_product(product: ProductCreate, service: ProductService = Depends(get_product_service)):
    """
    Creates a new product and returns it, including its generated `id`.
    """
    return service.create(product)


@app.get(
    "/products/",
    response_model=ProductPage,
    summary="Search products by criteria (paginated and sortable)",
)
def search_products(
    name: Optional[str] = Query(None, max_length=255, description="Case-insensitive substring of the name."),
    description: Optional[str] = Query(None, description="Case-insensitive substring of the description."),
    min_price: Optional[Decimal] = Query(None, gt=0, description="Inclusive lower price bound."),
    max_price: Optional[Decimal] = Query(None, gt=0, description="Inclusive upper price bound."),
    page: int = Query(0, ge=0, description="Zero-based page index."),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Page size."),
    sort: Optional[List[str]] = Query(
        None, description="Sort keys as `field` or `field,asc|desc`; repeatable. Defaults to `id,asc`."
    ),
    service: ProductService = Depends(get_product_service),
):
    """
    Returns one page of products matching every supplied criterion.
    Without criteria all products are paged. The page may be empty.
    """
    criteria = ProductSearch(
        name=name, description=description, min_price=min_price, max_price=max_price
    )
    page_spec = PageSpec(page=page, size=size, sort=parse_sort(sort))
    return service.search(criteria, page_spec)


@app.get(
    "/products/{product_id}",
    response_model=ProductResponse,
    summary="Retrieve a product by ID",
)
def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    """
    Returns the product, or 404 if it does not exist.
    """
    return service.get_by_id(product_id)


@app.patch(
    "/products/{product_id}",
    response_model=ProductResponse,
    summary="Partially update a product",
)
@app.put(
    "/products/{product_id}",
    response_model=ProductResponse,
    summary="Update an existing product",
)
def update_product(
    product_id: int, updated: ProductUpdate, service: ProductService = Depends(get_product_service)
):
    """
    Only the fields present (and not null) in the body are changed.
    Returns 404 if the product does not exist.
    """
    return service.update(product_id, updated)


@app.delete(
    "/products/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product by ID",
)
def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    """
    Returns 204 No Content on success, 404 if the product does not exist.
    """
    service.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# -----------------------------
# Factory Test Endpoints
# -----------------------------


@app.get(
    "/factory-tests/engines",
    response_model=List[EngineResponse],
    summary="List the configured engine variants",
)
def list_engines():
    return [EngineResponse.model_validate(engine) for engine in ENGINES.values()]


@app.post(
    "/factory-tests/",
    response_model=IgnitionResult,
    summary="Start the test car with the default engine",
)
def start_with_default_engine(key: IgnitionKey):
    return IgnitionResult.model_validate(start_car(DEFAULT_ENGINE, key.manufacturer))


@app.post(
    "/factory-tests/{engine}",
    response_model=IgnitionResult,
    summary="Start the test car with the given engine",
)
def start_with_engine(engine: EngineVariant, key: IgnitionKey):
    """
    Simulates starting the test car fitted with `engine` using `key`.
    The car only starts when the key was made for its manufacturer.
    """
    return IgnitionResult.model_validate(start_car(engine, key.manufacturer))
