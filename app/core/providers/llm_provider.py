"""
Abstract base class for LLM providers.

This module defines a vendor-neutral interface for interacting with
Large Language Models. Concrete implementations (Gemini, Groq) must
implement this interface.
"""
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.models.enums import LLMRole


class LLMMessage(BaseModel):
    """Vendor-neutral message format for LLM conversations."""
    
    role: LLMRole
    content: str
    
    model_config = ConfigDict(frozen=True)


class LLMResponse(BaseModel):
    """Standardized response from an LLM provider."""
    
    content: str
    model: str
    usage: Optional[dict[str, int]] = None
    
    model_config = ConfigDict(frozen=True)


class LLMProvider(ABC):
    """
    Abstract interface for LLM providers.
    
    Providers are created once per process and shared across requests;
    implementations must not keep per-request state.
    
    Example:
        provider = GeminiProvider(api_key="...", model_name="gemini-2.5-flash")
        response = await provider.generate_text(
            [LLMMessage(role=LLMRole.USER, content="Summarize this video...")],
            max_tokens=1500,
        )
        print(response.content)
    """

    model_name: str
    
    @abstractmethod
    async def generate_text(
        self,
        messages: list[LLMMessage],
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """
        Generate text completion from messages.
        
        Args:
            messages: List of conversation messages.
            temperature: Sampling temperature (0.0-1.0).
            max_tokens: Maximum tokens to generate (None for model default).
            
        Returns:
            LLMResponse containing generated content and metadata.
        """
        ...
