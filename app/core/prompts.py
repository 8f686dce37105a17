"""
Centralized configuration for LLM Prompts.

This module contains all instructions and prompt templates used across the application.
"""
from app.models.enums import SummaryType


class SummaryPrompts:
    """Instructions for the single-video Summarization Service."""

    BRIEF = "Provide a brief 2-3 sentence summary of this video."

    KEYPOINTS = "Extract and list the main key points from this video as clear bullet points."

    DETAILED = (
        "Provide a detailed summary of this video, including main topics, "
        "key insights, and important details."
    )

    # Instruction first, then the (possibly truncated) transcript
    TEMPLATE = "{instruction}\n\nVideo Transcript:\n{transcript}"

    @classmethod
    def instruction_for(cls, summary_type: SummaryType) -> str:
        """Return the instruction for a summarization mode."""
        if summary_type == SummaryType.BRIEF:
            return cls.BRIEF
        if summary_type == SummaryType.KEYPOINTS:
            return cls.KEYPOINTS
        return cls.DETAILED

    @classmethod
    def build(cls, summary_type: SummaryType, transcript: str) -> str:
        """Build the full prompt sent to the LLM."""
        return cls.TEMPLATE.format(
            instruction=cls.instruction_for(summary_type),
            transcript=transcript,
        )
