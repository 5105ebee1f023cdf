"""Presentation layer - console views and HTTP concerns.

Structure:
- api/: request-scoped dependencies, middleware and layout chrome
- routers/: the system router, the view routers and the error handlers

Views return JSON view-models built from application results. The
navigation guard runs as middleware before any view is reached.
"""
