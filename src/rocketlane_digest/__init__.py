"""
Rocketlane Digest.

Receives Rocketlane webhooks, summarizes the event with Gemini and emails the summary.
"""

__version__ = "1.0.0"
