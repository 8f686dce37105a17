"""
Provider abstraction layer for model-agnostic LLM integration.
"""
from app.core.providers.llm_provider import (
    LLMProvider,
    LLMMessage,
    LLMResponse,
)
from app.core.providers.gemini_provider import GeminiProvider
from app.core.providers.groq_provider import GroqProvider

__all__ = [
    "LLMProvider",
    "LLMMessage", 
    "LLMResponse",
    "GeminiProvider",
    "GroqProvider",
]
