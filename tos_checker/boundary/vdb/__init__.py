"""
Vector index boundary (Qdrant).

Optional enrichment path: documents can be stored as embedded chunks and
read back as context before analysis.
"""

from tos_checker.boundary.vdb.context_store import VectorContextStore, collection_name_for
from tos_checker.boundary.vdb.embeddings import create_embeddings
from tos_checker.boundary.vdb.qdrant_index import QdrantVectorIndex, create_qdrant_client

__all__ = [
    "QdrantVectorIndex",
    "VectorContextStore",
    "collection_name_for",
    "create_embeddings",
    "create_qdrant_client",
]
