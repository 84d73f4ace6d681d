from __future__ import annotations


class LayoutError(Exception):
    """Base class for errors raised by the layout engine."""


class InvalidConfig(LayoutError, ValueError):
    """A layout option is missing, malformed or out of range."""


class UnsupportedLanguage(LayoutError, LookupError):
    def __init__(self, language: str, supported: list[str] | None = None) -> None:
        self.language = language
        self.supported = list(supported or [])
        message = f"'{language}' is not a valid language code."
        if self.supported:
            message += " Supported languages: " + ", ".join(self.supported)
        super().__init__(message)


class HyphenatorUnavailable(LayoutError, RuntimeError):
    """A hyphenator for a known language could not be set up."""

    def __init__(self, backend: str, language: str, reason: object) -> None:
        self.backend = backend
        self.language = language
        super().__init__(f"Failed to initialise {backend} hyphenator for language '{language}': {reason}")
