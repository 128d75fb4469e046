# catalog_service/__main__.py

"""Run the Catalog Service with uvicorn: `python -m catalog_service`."""
import uvicorn

from .config import HOST, PORT

if __name__ == "__main__":
    uvicorn.run("catalog_service.main:app", host=HOST, port=PORT)
