"""Boundary adapters for external collaborators: cache, database, LLM and vector index."""
