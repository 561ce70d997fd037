"""Storefront FastAPI application.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# PROTEAN_ENV selects the config overlay from storefront/domain.toml
# (e.g. "production" switches the default database to PostgreSQL).
from storefront.api import create_app
from storefront.domain import storefront
from storefront.utils.logging import configure_logging

configure_logging()
storefront.init()

app = create_app(storefront)
