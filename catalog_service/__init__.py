# catalog_service/__init__.py

"""Product catalog service: CRUD and criteria search over products."""

__version__ = "1.0.0"
