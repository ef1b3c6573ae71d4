"""Pydantic DTOs exchanged over the wire."""
