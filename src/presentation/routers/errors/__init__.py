"""RFC 7807 error responses for console routes."""

from src.presentation.routers.errors.exception_handlers import register_exception_handlers
from src.presentation.routers.errors.problem_details import ProblemDetails

__all__ = ["ProblemDetails", "register_exception_handlers"]
