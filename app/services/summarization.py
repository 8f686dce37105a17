"""
Single-video summarization service.

The instruction is chosen by summarization mode (brief / keypoints /
detailed), prepended to the prepared transcript text and sent to the
configured LLM provider as one user message.
"""
from loguru import logger

from app.models import LLMRole, SummaryType
from app.core.constants import SummaryConfig
from app.core.exceptions import SummarizationFailedError
from app.core.providers.llm_provider import LLMProvider, LLMMessage
from app.core.prompts import SummaryPrompts


class SummarizationService:
    """
    Summarizes one transcript with a mode-specific instruction.

    The output length is capped at SummaryConfig.MAX_OUTPUT_TOKENS. Provider
    errors are not retried.
    """

    def __init__(self, llm_provider: LLMProvider):
        """
        Initialize the summarization service.
        
        Args:
            llm_provider: LLM provider for text generation.
        """
        self.llm_provider = llm_provider

    async def summarize(
        self, text: str, summary_type: SummaryType = SummaryType.DETAILED
    ) -> str:
        """
        Generate a summary of the transcript text.

        Args:
            text: Prepared (possibly truncated) transcript text.
            summary_type: Summarization mode selecting the instruction.

        Returns:
            The generated summary text.

        Raises:
            SummarizationFailedError: If the provider call fails or returns no text.
        """
        messages = [
            LLMMessage(
                role=LLMRole.USER,
                content=SummaryPrompts.build(summary_type, text),
            ),
        ]

        logger.info(
            f"Sending {len(text)} chars to {self.llm_provider.model_name} "
            f"for a '{summary_type.value}' summary"
        )
        try:
            response = await self.llm_provider.generate_text(
                messages=messages,
                temperature=SummaryConfig.TEMPERATURE,
                max_tokens=SummaryConfig.MAX_OUTPUT_TOKENS,
            )
        except Exception as e:
            logger.error(f"Error with summarization provider: {type(e).__name__}: {e}")
            raise SummarizationFailedError(str(e) or type(e).__name__) from e

        if not response.content or not response.content.strip():
            raise SummarizationFailedError("provider returned an empty completion")

        if response.usage:
            logger.info(f"Token usage: {response.usage}")
        return response.content
