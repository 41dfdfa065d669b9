"""Prompt configuration domain entity."""

from dataclasses import dataclass
from datetime import datetime

REVIEWS_PLACEHOLDER = "{{reviews}}"

DEFAULT_REVIEW_SUMMARY_PROMPT = f"""You are analyzing reviews for a mental health therapist. Your task is to create a helpful, balanced summary that potential clients can use to make informed decisions.

Given the following reviews, provide:
1. A brief overall impression (2-3 sentences)
2. Key strengths mentioned across reviews
3. Any common concerns or areas for improvement
4. Who this therapist might be best suited for

Reviews:
{REVIEWS_PLACEHOLDER}

Provide a professional, empathetic summary that helps potential clients understand what to expect. Be honest but constructive."""

DEFAULT_SYSTEM_MESSAGE = (
    "You are a helpful assistant specialized in analyzing mental health professional "
    "reviews to help potential clients make informed decisions."
)

DEFAULT_DESCRIPTION = "Default review summary prompt"


@dataclass(frozen=True)
class PromptConfigEntity:
    """A named prompt template and system message pair.

    Attributes:
        name: Unique configuration name (e.g. "review_summary")
        prompt_template: Template containing the ``{{reviews}}`` placeholder
        system_message: Optional system message sent ahead of the prompt
        description: Optional human-readable description
        is_active: Whether this configuration is used for generation
        created_at: Creation time; None for the built-in default
        updated_at: Last update time; None for the built-in default
        is_default: True for the built-in fallback, which is never persisted
    """

    name: str
    prompt_template: str
    system_message: str | None = None
    description: str | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
    is_default: bool = False

    @classmethod
    def default(cls, name: str) -> "PromptConfigEntity":
        """Build the built-in fallback configuration for ``name``."""
        return cls(
            name=name,
            prompt_template=DEFAULT_REVIEW_SUMMARY_PROMPT,
            system_message=DEFAULT_SYSTEM_MESSAGE,
            description=DEFAULT_DESCRIPTION,
            is_active=True,
            is_default=True,
        )

    def fill(self, reviews_text: str) -> str:
        """Substitute rendered reviews into the first placeholder of the template."""
        return self.prompt_template.replace(REVIEWS_PLACEHOLDER, reviews_text, 1)
