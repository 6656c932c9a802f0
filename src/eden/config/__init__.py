"""Configuration: pydantic models, settings resolution, logging setup."""
