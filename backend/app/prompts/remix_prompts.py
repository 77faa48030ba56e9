"""
Prompts for remixing text in different styles.

Each remix type maps to exactly one description and one template. Templates
take a single ``{text}`` placeholder.
"""
from dataclasses import dataclass
from typing import Dict

from app.core.constants import RemixType


@dataclass(frozen=True)
class RemixPrompt:
    """Description and prompt template for one remix type."""
    description: str
    template: str

    def render(self, text: str) -> str:
        return self.template.format(text=text)


REMIX_PROMPTS: Dict[RemixType, RemixPrompt] = {
    RemixType.IMPROVE: RemixPrompt(
        description="Improve clarity, flow, and impact",
        template="""Please improve the following text to make it clearer, more engaging, and better written. Keep the original meaning and tone, fix any grammar or spelling issues, and improve the flow between sentences.

Text:
{text}""",
    ),
    RemixType.SUMMARIZE: RemixPrompt(
        description="Condense into a concise summary",
        template="""Please create a concise summary of the following text. Capture the key points and main ideas in as few words as possible without losing important information.

Text:
{text}""",
    ),
    RemixType.EXPAND: RemixPrompt(
        description="Add detail, examples, and context",
        template="""Please expand the following text with more detail, relevant examples, and helpful context. Keep the original message and structure, but make it more comprehensive.

Text:
{text}""",
    ),
    RemixType.CASUAL: RemixPrompt(
        description="Rewrite in a relaxed, conversational tone",
        template="""Please rewrite the following text in a casual, friendly, conversational tone, as if talking to a friend. Keep the same meaning.

Text:
{text}""",
    ),
    RemixType.FORMAL: RemixPrompt(
        description="Rewrite in a professional, formal tone",
        template="""Please rewrite the following text in a formal, professional tone suitable for business or academic contexts. Keep the same meaning.

Text:
{text}""",
    ),
    RemixType.THREAD: RemixPrompt(
        description="Turn into a numbered Twitter/X thread with hashtags",
        template="""Please turn the following text into a Twitter/X thread. Number each tweet (1/, 2/, ...), keep every tweet under 280 characters, make the first tweet a strong hook, and add a few relevant hashtags to the final tweet.

Text:
{text}""",
    ),
    RemixType.UNIQUE: RemixPrompt(
        description="Generate 5-8 standalone tweets without hashtags",
        template="""Please write between 5 and 8 unique, standalone tweets based on the following text. Each tweet must make sense on its own, stay under 280 characters, and use no hashtags. Separate the tweets with a blank line and do not number them.

Text:
{text}""",
    ),
}

# System prompt for the remix assistant
REMIX_SYSTEM_PROMPT = "You are a skilled writing assistant that rewrites text according to specific instructions. Respond only with the rewritten text, no explanations or preamble."


def build_remix_prompt(remix_type: RemixType, text: str) -> str:
    """Render the user prompt for a remix type."""
    return REMIX_PROMPTS[remix_type].render(text)
