"""
Completion service abstraction.

RemixService only depends on the CompletionService protocol, so tests can
swap in a fake; OpenAIProvider is the production implementation and is the
single place where OpenAI SDK errors are mapped onto the app's error taxonomy.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import openai
from openai import OpenAI

from app.core.constants import AIModels
from app.core.exceptions import AuthError, RateLimited, UpstreamError
from app.prompts import REMIX_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


@dataclass
class AIResponse:
    """Standardized completion result."""
    content: str
    model: str
    tokens_used: int = 0


class CompletionService(Protocol):
    """Anything that turns a prompt into generated text."""

    def generate(self, prompt: str, max_tokens: int) -> AIResponse:
        ...


class OpenAIProvider:
    """OpenAI chat-completions provider."""

    def __init__(
        self,
        api_key: str,
        model: str = AIModels.REMIX_MODEL,
        temperature: float = AIModels.REMIX_TEMPERATURE,
        system_prompt: Optional[str] = REMIX_SYSTEM_PROMPT
    ):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.system_prompt = system_prompt
        self._client = None

    @property
    def client(self) -> OpenAI:
        """Lazily initialize the OpenAI client."""
        if self._client is None:
            self._client = OpenAI(api_key=self.api_key)
        return self._client

    def generate(self, prompt: str, max_tokens: int = AIModels.REMIX_MAX_TOKENS) -> AIResponse:
        """Generate a completion for a single user prompt."""
        messages = []
        if self.system_prompt:
            messages.append({"role": "system", "content": self.system_prompt})
        messages.append({"role": "user", "content": prompt})

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.temperature,
                max_tokens=max_tokens
            )
        except openai.AuthenticationError as e:
            logger.error(f"OpenAI rejected the API key: {e}")
            raise AuthError("Invalid OpenAI API key", detail=str(e))
        except openai.RateLimitError as e:
            logger.warning(f"OpenAI rate limit hit: {e}")
            raise RateLimited(detail=str(e))
        except Exception as e:
            logger.error(f"OpenAI request failed: {e}")
            raise UpstreamError(detail=f"OpenAI request failed: {str(e)}")

        content = None
        if response.choices:
            content = response.choices[0].message.content
        if not content or not content.strip():
            raise UpstreamError(detail="OpenAI returned an empty completion")

        tokens = response.usage.total_tokens if response.usage else 0
        return AIResponse(content=content, model=self.model, tokens_used=tokens)
