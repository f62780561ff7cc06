"""Schemas: pydantic models for the catalog snapshot document and API responses."""
