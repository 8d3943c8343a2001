# src/cityhall/middleware/__init__.py

"""Middleware components for the City Hall API."""

from .body_limit import BodySizeLimitMiddleware
from .logging import RequestLoggingMiddleware

__all__ = ["BodySizeLimitMiddleware", "RequestLoggingMiddleware"]
