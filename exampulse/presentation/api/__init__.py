"""REST API (FastAPI)."""
from exampulse.presentation.api.routes import router, init_routes, domain_error_handler

__all__ = ["router", "init_routes", "domain_error_handler"]
