"""Storefront API package."""

from fastapi import FastAPI, Request

from storefront.api.errors import setup_exception_handlers
from storefront.api.routes import mutation_router, query_router

__all__ = ["create_app", "mutation_router", "query_router", "setup_exception_handlers"]


def create_app(domain=None) -> FastAPI:
    """Build the FastAPI app. The domain must already be initialized."""
    if domain is None:
        from storefront.domain import storefront as domain

    app = FastAPI(
        title="Storefront API",
        description="Product catalogue, shopping carts and inventory settlement",
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context for each request."""
        with domain.domain_context():
            response = await call_next(request)
        return response

    setup_exception_handlers(app)
    app.include_router(query_router)
    app.include_router(mutation_router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "domain": domain.name}

    return app
