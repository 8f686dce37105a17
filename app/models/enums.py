"""
Enums for type-safe values across the application.
"""
from enum import Enum
from typing import Any


class LLMRole(str, Enum):
    """Role for LLM provider messages (OpenAI/Gemini/Groq compatible)."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class LLMProviderType(str, Enum):
    """Supported LLM provider types for configuration."""
    GEMINI = "gemini"
    GROQ = "groq"


class SummaryType(str, Enum):
    """Summarization mode selecting the instruction sent to the LLM."""
    BRIEF = "brief"
    KEYPOINTS = "keypoints"
    DETAILED = "detailed"

    @classmethod
    def parse(cls, value: Any) -> "SummaryType":
        """Resolve a raw request value exactly, falling back to DETAILED."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        return cls.DETAILED


class MetadataStatus(str, Enum):
    """Outcome of a video catalog lookup."""
    FOUND = "found"
    NOT_FOUND = "not_found"
    TRANSPORT_ERROR = "transport_error"
