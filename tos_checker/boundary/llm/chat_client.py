"""
Language model collaborator.

Wraps LangChain chat models behind a single ``complete(prompt, model_name)``
call that returns plain text. One chat model instance is built per model
name and reused for the life of the client.

Dependencies: langchain_core, langchain_google_genai, tos_checker.configs
System role: Outbound LLM calls for chunk analysis and summarization
"""

import logging
from typing import Any, Callable, Protocol

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage

from tos_checker.configs.llm import LLMSettings
from tos_checker.core.exceptions import ConfigurationError, LanguageModelError

logger = logging.getLogger(__name__)

ChatModelFactory = Callable[[str], BaseChatModel]


class LanguageModelClient(Protocol):
    """Anything that turns a prompt into text with a named model."""

    async def complete(self, prompt: str, model_name: str) -> str: ...


def extract_text_content(content: Any) -> str:
    """
    Pull the text out of a chat message's ``content``.

    Gemini may answer with a list of content blocks instead of a string.

    Args:
        content: ``AIMessage.content``

    Returns:
        str: Concatenated text

    Raises:
        LanguageModelError: If the content holds no text at all
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts: list[str] = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(str(block.get("text", "")))
        if parts or not content:
            return "".join(parts)
    raise LanguageModelError(
        "Model response has no text content",
        details={"content_type": type(content).__name__},
    )


def google_chat_model_factory(settings: LLMSettings) -> ChatModelFactory:
    """
    Build a factory producing Gemini chat models from settings.

    Args:
        settings: LLM settings

    Returns:
        ChatModelFactory: Callable taking a model name

    Raises:
        ConfigurationError: If no Google API key is configured
    """
    if not settings.google_api_key:
        raise ConfigurationError(
            "GOOGLE_API_KEY is required for the language model client",
            details={"setting": "LLM_GOOGLE_API_KEY"},
        )

    from langchain_google_genai import ChatGoogleGenerativeAI

    def factory(model_name: str) -> BaseChatModel:
        return ChatGoogleGenerativeAI(
            model=model_name,
            temperature=settings.temperature,
            google_api_key=settings.google_api_key,
            timeout=settings.request_timeout_seconds,
            max_retries=settings.max_retries,
        )

    return factory


class LangChainChatClient:
    """
    LanguageModelClient backed by LangChain chat models.

    Usage:
        client = LangChainChatClient(google_chat_model_factory(settings.llm))
        text = await client.complete("Summarize ...", "gemini-2.5-flash")
    """

    def __init__(self, model_factory: ChatModelFactory) -> None:
        """
        Initialize client with a chat model factory.

        Args:
            model_factory: Builds a chat model for a model name
        """
        self._model_factory = model_factory
        self._models: dict[str, BaseChatModel] = {}

    def _get_model(self, model_name: str) -> BaseChatModel:
        model = self._models.get(model_name)
        if model is None:
            model = self._model_factory(model_name)
            self._models[model_name] = model
            logger.info(f"Initialized chat model {model_name}")
        return model

    async def complete(self, prompt: str, model_name: str) -> str:
        """
        Send one user prompt and return the reply text.

        Args:
            prompt: Fully rendered prompt
            model_name: Provider model identifier

        Returns:
            str: Reply text (may be empty)

        Raises:
            LanguageModelError: On any provider failure or non-text reply
        """
        model = self._get_model(model_name)
        try:
            response = await model.ainvoke([HumanMessage(content=prompt)])
        except Exception as e:
            raise LanguageModelError(
                f"Completion failed: {type(e).__name__}: {e}",
                model_name=model_name,
            ) from e

        try:
            return extract_text_content(response.content)
        except LanguageModelError as e:
            e.details["model_name"] = model_name
            raise
