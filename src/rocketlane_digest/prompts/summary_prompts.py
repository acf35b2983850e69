"""
Prompt used to summarize Rocketlane project events.
"""

import json
from typing import Any

PROJECT_ANALYSIS_INSTRUCTION = (
    "Please analyze the following project data from Rocketlane and provide a "
    "concise summary with key insights and action items:"
)


def format_event_data(data: Any) -> str:
    """Pretty-print the webhook ``data`` value as it is shown to the model."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def get_project_analysis_prompt(data: Any) -> str:
    """
    Build the summarization prompt for a webhook payload.

    Args:
        data: The opaque ``data`` value from the webhook body

    Returns:
        The instruction followed by a blank line and the serialized data
    """
    return f"{PROJECT_ANALYSIS_INSTRUCTION}\n\n{format_event_data(data)}"
