# catalog_service/exceptions.py

"""
Domain errors raised by the Catalog Service.
The HTTP translation lives in `errors.py`; nothing here depends on FastAPI.
"""


class CatalogError(Exception):
    """Base class for errors raised by the catalog."""


class NotFoundError(CatalogError):
    """The referenced record does not exist in the store."""

    def __init__(self, resource, resource_id):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} not found with id: {resource_id}")


class InvalidRequestError(CatalogError):
    """Input rejected outside of the Pydantic models (e.g. sort parameters)."""

    def __init__(self, field, message):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")
