"""Custom exception hierarchy for crossword layout generation."""


class CrosswordError(Exception):
    """Base exception for generator failures."""


class ConfigurationError(CrosswordError):
    """Raised when a generation run is requested with unusable settings."""


class WordValidationError(CrosswordError):
    """Raised when a submitted word does not match the accepted alphabet."""


class WordImportError(CrosswordError):
    """Raised when a word list cannot be read or exported."""


class SlotPlacementError(CrosswordError):
    """Raised when a word cannot be written to the grid without breaking rules."""


class ClueGenerationError(CrosswordError):
    """Raised when an external clue writer fails."""


class ValidationError(CrosswordError):
    """Raised when the crossword integrity checks fail."""
