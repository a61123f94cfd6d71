"""
Test suite for the LangChain chat client.

System role: Verification of the language model collaborator
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage, HumanMessage

from tos_checker.boundary.llm.chat_client import (
    LangChainChatClient,
    extract_text_content,
    google_chat_model_factory,
)
from tos_checker.configs.llm import LLMSettings
from tos_checker.core.exceptions import ConfigurationError, LanguageModelError


class TestExtractTextContent:
    """Test suite for extract_text_content()."""

    def test_should_return_plain_string(self) -> None:
        assert extract_text_content("hello") == "hello"

    def test_should_join_text_blocks(self) -> None:
        content = [{"type": "text", "text": "a"}, "b", {"type": "image_url", "image_url": "x"}]

        assert extract_text_content(content) == "ab"

    def test_should_return_empty_string_for_empty_list(self) -> None:
        assert extract_text_content([]) == ""

    @pytest.mark.parametrize("content", [None, 42, [{"type": "image_url"}]])
    def test_should_reject_content_without_text(self, content) -> None:
        with pytest.raises(LanguageModelError):
            extract_text_content(content)


class TestLangChainChatClient:
    """Test suite for LangChainChatClient.complete()."""

    @pytest.mark.asyncio
    async def test_complete_should_send_prompt_as_human_message(self) -> None:
        model = MagicMock()
        model.ainvoke = AsyncMock(return_value=AIMessage(content="reply"))
        client = LangChainChatClient(lambda name: model)

        reply = await client.complete("prompt text", "gemini-2.5-flash")

        assert reply == "reply"
        messages = model.ainvoke.await_args.args[0]
        assert messages == [HumanMessage(content="prompt text")]

    @pytest.mark.asyncio
    async def test_complete_should_build_one_model_per_name(self) -> None:
        model = MagicMock()
        model.ainvoke = AsyncMock(return_value=AIMessage(content="x"))
        factory = MagicMock(return_value=model)
        client = LangChainChatClient(factory)

        await client.complete("a", "model-a")
        await client.complete("b", "model-a")
        await client.complete("c", "model-b")

        assert [c.args[0] for c in factory.call_args_list] == ["model-a", "model-b"]

    @pytest.mark.asyncio
    async def test_complete_should_wrap_provider_errors(self) -> None:
        model = MagicMock()
        model.ainvoke = AsyncMock(side_effect=RuntimeError("429 quota"))
        client = LangChainChatClient(lambda name: model)

        with pytest.raises(LanguageModelError) as exc_info:
            await client.complete("p", "gemini-2.5-flash")

        assert exc_info.value.details["model_name"] == "gemini-2.5-flash"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_complete_should_reject_non_text_reply(self) -> None:
        model = MagicMock()
        model.ainvoke = AsyncMock(return_value=MagicMock(content=None))
        client = LangChainChatClient(lambda name: model)

        with pytest.raises(LanguageModelError) as exc_info:
            await client.complete("p", "m")

        assert exc_info.value.details["model_name"] == "m"


class TestGoogleChatModelFactory:
    """Test suite for google_chat_model_factory()."""

    def test_should_require_api_key(self) -> None:
        settings = LLMSettings(_env_file=None, google_api_key=None)

        with pytest.raises(ConfigurationError):
            google_chat_model_factory(settings)

    def test_should_build_gemini_model(self) -> None:
        settings = LLMSettings(_env_file=None, google_api_key="test-key")

        model = google_chat_model_factory(settings)("gemini-2.5-flash")

        assert model.model.endswith("gemini-2.5-flash")
