from .settings import AppSettings, EmailSettings, GeminiSettings, SMTPSettings, settings

__all__ = ["settings", "AppSettings", "GeminiSettings", "SMTPSettings", "EmailSettings"]
