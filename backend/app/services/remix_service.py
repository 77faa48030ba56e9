"""
Remix Service: validates remix requests, renders the prompt for the chosen
remix type and asks the completion service for the rewritten text.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from app.core.config import Settings, settings as default_settings
from app.core.constants import AIModels, DEFAULT_REMIX_TYPE, RemixType, TextLimits
from app.core.exceptions import ConfigurationError, InvalidInput
from app.prompts import REMIX_PROMPTS, build_remix_prompt
from app.services.ai_provider import CompletionService, OpenAIProvider
from app.utils.text import is_encodable

logger = logging.getLogger(__name__)


class RemixService:
    """Service for transforming text with the completion service."""

    def __init__(
        self,
        provider: Optional[CompletionService] = None,
        config: Optional[Settings] = None
    ):
        self.config = config or default_settings
        self._provider = provider

    @property
    def provider(self) -> CompletionService:
        """Lazily build the OpenAI provider from config."""
        if self._provider is None:
            self._provider = OpenAIProvider(
                api_key=self.config.OPENAI_API_KEY,
                model=self.config.OPENAI_MODEL
            )
        return self._provider

    @staticmethod
    def list_types() -> List[Dict[str, str]]:
        """Return every supported remix type with its description."""
        return [
            {"type": remix_type.value, "description": REMIX_PROMPTS[remix_type].description}
            for remix_type in RemixType
        ]

    @staticmethod
    def validate(text: Any, remix_type: Optional[str] = None) -> tuple[str, RemixType]:
        """
        Check a remix request and return the trimmed text and resolved type.

        Rules are applied in order and the first failure wins.
        """
        if not isinstance(text, str) or not text.strip():
            raise InvalidInput("Text is required")

        text = text.strip()
        if not is_encodable(text):
            raise InvalidInput("Text must be valid UTF-8")

        if len(text) > TextLimits.REMIX_MAX_CHARS:
            raise InvalidInput(f"Text is too long (maximum {TextLimits.REMIX_MAX_CHARS} characters)")

        if remix_type is None:
            return text, DEFAULT_REMIX_TYPE

        try:
            return text, RemixType(remix_type)
        except ValueError:
            valid = ", ".join(t.value for t in RemixType)
            raise InvalidInput(f"Unknown remix type '{remix_type}'. Valid types: {valid}")

    def remix(self, text: Any, remix_type: Optional[str] = None) -> Dict[str, Any]:
        """
        Transform text with the given remix type.

        Raises InvalidInput before anything else, then ConfigurationError if no
        usable API key is configured. Provider failures surface as AuthError,
        RateLimited or UpstreamError and are never retried.
        """
        text, resolved_type = self.validate(text, remix_type)

        if not self.config.openai_configured:
            raise ConfigurationError(
                "OpenAI API key is not configured",
                detail="Set OPENAI_API_KEY in the environment or .env file"
            )

        prompt = build_remix_prompt(resolved_type, text)
        logger.info(f"Remixing {len(text)} characters as '{resolved_type.value}'")

        response = self.provider.generate(prompt, AIModels.REMIX_MAX_TOKENS)
        remixed_text = response.content.strip()

        logger.info(
            f"Remix '{resolved_type.value}' done with {response.model} "
            f"({response.tokens_used} tokens)"
        )

        return {
            "remixed_text": remixed_text,
            "original_length": len(text),
            "remixed_length": len(remixed_text),
            "type": resolved_type.value,
            "timestamp": datetime.utcnow().isoformat(),
        }
