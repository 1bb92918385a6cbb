"""Exceptions raised by the kaddu core."""


class KadduError(Exception):
    """Base class for kaddu errors."""


class CatalogError(KadduError):
    """The word catalog could not be loaded. Fatal for the whole game."""


class UnsupportedLanguage(KadduError, ValueError):
    """A language code outside the fixed language list."""

    def __init__(self, language):
        super().__init__(f"Unsupported language: {language!r}")
        self.language = language


class InvalidTransition(KadduError, RuntimeError):
    """A session operation was called from a state that does not allow it."""

    def __init__(self, operation: str, state):
        super().__init__(f"Cannot {operation} while in state {state.value}")
        self.operation = operation
        self.state = state


class AssetMissing(KadduError, FileNotFoundError):
    """An image or audio file is not available."""
