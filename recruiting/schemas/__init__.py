"""
Schemas module - Request/Response schemas for API endpoints.

Difference from models:
- Models: service-layer records (recruiting.models)
- Schemas: API contract (what client sends/receives)
"""
