"""
Infrastructure layer.

Implementations of the application ports and everything web-facing:

- In-memory session storage
- Web framework (FastAPI routers, WebSocket live sessions)
- Request and wire schemas
- Dependency injection glue
"""
