"""Adapters – MongoDB and FastAPI integrations."""
