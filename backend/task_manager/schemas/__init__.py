"""API Schemas — Pydantic models for request/response boundaries."""
