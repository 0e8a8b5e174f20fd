"""Pydantic output schemas for every API command."""
