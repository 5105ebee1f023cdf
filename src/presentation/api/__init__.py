"""API module - request plumbing.

- middleware/: trace, console session and navigation guard middleware
- dependencies: FastAPI dependencies resolving per-request services
- chrome: authenticated-only layout affordances
"""
