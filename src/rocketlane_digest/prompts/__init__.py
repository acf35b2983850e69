"""
Prompt templates for Rocketlane Digest.
"""

from .summary_prompts import (
    PROJECT_ANALYSIS_INSTRUCTION,
    format_event_data,
    get_project_analysis_prompt,
)

__all__ = [
    "PROJECT_ANALYSIS_INSTRUCTION",
    "format_event_data",
    "get_project_analysis_prompt",
]
