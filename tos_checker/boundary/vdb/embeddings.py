"""
Embedding model factory.

Dependencies: langchain_google_genai
System role: Embeddings for the vector enrichment path
"""

from langchain_core.embeddings import Embeddings

from tos_checker.configs.llm import LLMSettings
from tos_checker.configs.vector_store import VectorStoreSettings
from tos_checker.core.exceptions import ConfigurationError


def create_embeddings(vector_settings: VectorStoreSettings, llm_settings: LLMSettings) -> Embeddings:
    """
    Build the Google embeddings model used for stored chunks.

    Raises:
        ConfigurationError: If no Google API key is configured
    """
    if not llm_settings.google_api_key:
        raise ConfigurationError(
            "GOOGLE_API_KEY is required for embeddings",
            details={"setting": "LLM_GOOGLE_API_KEY"},
        )

    from langchain_google_genai import GoogleGenerativeAIEmbeddings

    return GoogleGenerativeAIEmbeddings(
        model=vector_settings.embedding_model,
        google_api_key=llm_settings.google_api_key,
    )
