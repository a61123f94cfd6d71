"""Language model boundary."""

from tos_checker.boundary.llm.chat_client import (
    LangChainChatClient,
    LanguageModelClient,
    extract_text_content,
    google_chat_model_factory,
)

__all__ = [
    "LangChainChatClient",
    "LanguageModelClient",
    "extract_text_content",
    "google_chat_model_factory",
]
