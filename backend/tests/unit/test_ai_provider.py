"""
Unit tests for OpenAIProvider error mapping.
"""
import httpx
import openai
import pytest
from unittest.mock import MagicMock, patch

from app.core.exceptions import AuthError, RateLimited, UpstreamError
from app.prompts import REMIX_SYSTEM_PROMPT
from app.services.ai_provider import OpenAIProvider


def _status_error(error_class, status_code):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    response = httpx.Response(status_code, request=request)
    return error_class("upstream said no", response=response, body=None)


def _completion(content, total_tokens=42):
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=content))]
    response.usage = MagicMock(total_tokens=total_tokens)
    return response


class TestOpenAIProvider:
    """Test completion calls against a mocked OpenAI client."""

    @patch('app.services.ai_provider.OpenAI')
    def test_generate_success(self, mock_openai_class):
        """Should send system and user messages and return the content."""
        mock_client = MagicMock()
        mock_openai_class.return_value = mock_client
        mock_client.chat.completions.create.return_value = _completion("Rewritten text")

        provider = OpenAIProvider(api_key="test-key-123", model="gpt-3.5-turbo")
        result = provider.generate("Improve this", max_tokens=1000)

        assert result.content == "Rewritten text"
        assert result.model == "gpt-3.5-turbo"
        assert result.tokens_used == 42
        mock_openai_class.assert_called_once_with(api_key="test-key-123")

        call_kwargs = mock_client.chat.completions.create.call_args[1]
        assert call_kwargs["max_tokens"] == 1000
        assert call_kwargs["messages"] == [
            {"role": "system", "content": REMIX_SYSTEM_PROMPT},
            {"role": "user", "content": "Improve this"},
        ]

    @patch('app.services.ai_provider.OpenAI')
    def test_authentication_error_maps_to_auth_error(self, mock_openai_class):
        mock_client = MagicMock()
        mock_openai_class.return_value = mock_client
        mock_client.chat.completions.create.side_effect = _status_error(openai.AuthenticationError, 401)

        provider = OpenAIProvider(api_key="bad-key")
        with pytest.raises(AuthError) as exc_info:
            provider.generate("Hello", max_tokens=1000)

        assert exc_info.value.status_code == 401

    @patch('app.services.ai_provider.OpenAI')
    def test_rate_limit_maps_to_rate_limited(self, mock_openai_class):
        mock_client = MagicMock()
        mock_openai_class.return_value = mock_client
        mock_client.chat.completions.create.side_effect = _status_error(openai.RateLimitError, 429)

        provider = OpenAIProvider(api_key="test-key")
        with pytest.raises(RateLimited) as exc_info:
            provider.generate("Hello", max_tokens=1000)

        assert exc_info.value.status_code == 429
        assert mock_client.chat.completions.create.call_count == 1

    @patch('app.services.ai_provider.OpenAI')
    def test_other_api_errors_map_to_upstream_error(self, mock_openai_class):
        mock_client = MagicMock()
        mock_openai_class.return_value = mock_client
        mock_client.chat.completions.create.side_effect = _status_error(openai.InternalServerError, 503)

        provider = OpenAIProvider(api_key="test-key")
        with pytest.raises(UpstreamError) as exc_info:
            provider.generate("Hello", max_tokens=1000)

        assert "upstream said no" in exc_info.value.detail

    @patch('app.services.ai_provider.OpenAI')
    def test_transport_failure_maps_to_upstream_error(self, mock_openai_class):
        mock_client = MagicMock()
        mock_openai_class.return_value = mock_client
        mock_client.chat.completions.create.side_effect = ConnectionResetError("connection reset")

        provider = OpenAIProvider(api_key="test-key")
        with pytest.raises(UpstreamError, match="Failed to remix content"):
            provider.generate("Hello", max_tokens=1000)

    @patch('app.services.ai_provider.OpenAI')
    def test_empty_completion_is_upstream_error(self, mock_openai_class):
        mock_client = MagicMock()
        mock_openai_class.return_value = mock_client
        mock_client.chat.completions.create.return_value = _completion(None)

        provider = OpenAIProvider(api_key="test-key")
        with pytest.raises(UpstreamError):
            provider.generate("Hello", max_tokens=1000)

    @patch('app.services.ai_provider.OpenAI')
    def test_client_created_lazily(self, mock_openai_class):
        OpenAIProvider(api_key="test-key")
        mock_openai_class.assert_not_called()
