"""Pydantic models for headinglinks configuration and heading lookup."""
