"""Application layer - console use cases.

Services here orchestrate the domain types against the Midas API ports:
- credential_store / auth_gateway: operator login and logout
- error_classifier: the single failure policy for remote calls
- health_probe / navigation_guard: per-navigation access decisions
- bounded_task: timed background execution with a single-result channel
- resource_service / greeting_service: what the views consume

No module here imports FastAPI. Infrastructure implements the protocols
and presentation wires everything per request.
"""
