from typing import Optional


class KhayrahError(Exception):
    pass


class ConfigError(KhayrahError):
    """Raised at startup when a required setting is missing or malformed."""


class LLMError(KhayrahError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ModelOutputError(KhayrahError):
    """The model replied with something that is not a JSON object."""

    def __init__(self, message: str, raw: str):
        super().__init__(message)
        self.raw = raw
