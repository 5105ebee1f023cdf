"""Test suite for the Midas console.

Test structure follows the test pyramid:
- unit/: Unit tests - services and value types with mocked ports
- integration/: Midas API clients against pytest-httpx mocked transport
- api/: Console routes end-to-end through FastAPI TestClient
"""
