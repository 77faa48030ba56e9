"""
Centralized prompts for all AI services.
"""
from app.prompts.remix_prompts import (
    REMIX_PROMPTS,
    REMIX_SYSTEM_PROMPT,
    RemixPrompt,
    build_remix_prompt,
)

__all__ = [
    # Remix styles
    "REMIX_PROMPTS",
    "REMIX_SYSTEM_PROMPT",
    "RemixPrompt",
    "build_remix_prompt",
]
