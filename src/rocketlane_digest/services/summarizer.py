"""
Gemini summarization client.
Turns an opaque Rocketlane event payload into a prose summary.
"""

import asyncio
from typing import Any, Optional

import google.generativeai as genai
from loguru import logger

from rocketlane_digest.config.settings import GeminiSettings
from rocketlane_digest.core.exceptions import create_summarization_error
from rocketlane_digest.prompts import get_project_analysis_prompt


class GeminiSummarizer:
    """
    Single-attempt Gemini client.

    The underlying model handle is created once and reused for every request;
    it carries no per-request state.
    """

    provider_name = "gemini"

    def __init__(self, gemini_settings: GeminiSettings, model: Optional[Any] = None):
        self.model_name = gemini_settings.model_name

        if model is None:
            if gemini_settings.api_key:
                genai.configure(api_key=gemini_settings.api_key)
                logger.info("Using Gemini with API key")
            else:
                logger.warning("GEMINI_API_KEY is not set - summarization calls will fail")
            model = genai.GenerativeModel(self.model_name)

        self.model = model
        logger.info(f"GeminiSummarizer initialized with model: {self.model_name}")

    async def summarize(self, data: Any) -> str:
        """
        Summarize the event data.

        Args:
            data: JSON-compatible value taken from the webhook body

        Returns:
            The generated summary text, unmodified

        Raises:
            SummarizationError: if the Gemini call fails for any reason
        """
        prompt = get_project_analysis_prompt(data)
        logger.debug(f"Sending {len(prompt)} character prompt to {self.model_name}")

        try:
            response = await asyncio.to_thread(self.model.generate_content, prompt)
            summary = response.text
        except Exception as e:
            logger.error(f"Gemini summarization failed: {e}")
            raise create_summarization_error(self.provider_name, self.model_name, e) from e

        logger.info(f"Gemini returned a {len(summary)} character summary")
        return summary
