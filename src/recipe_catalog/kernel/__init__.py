"""Kernel – errors and the recipe domain model."""
