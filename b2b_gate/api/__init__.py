"""API Layer: FastAPI routes and error handlers around the visibility service."""
