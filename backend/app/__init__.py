"""FastAPI application for the profile API."""
