"""Application layer – recipe query engine and recipe use cases."""
