"""HTTP presentation layer."""

from modelcdn.api.router import api_router, site_router

__all__ = ["api_router", "site_router"]
