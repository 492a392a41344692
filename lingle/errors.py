"""
Exceptions raised by the Lingle game engine
"""


class GameError(Exception):
    """Base class for game engine errors"""


class UnsupportedLanguageError(GameError):
    """Language code has no word list in the word bank"""

    def __init__(self, language: str):
        super().__init__(f"Unsupported language: {language!r}")
        self.language = language


class LengthMismatchError(GameError, ValueError):
    """Guess length disagrees with the target (or verdict row) length"""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Expected {expected} letters, got {actual}")
        self.expected = expected
        self.actual = actual


class EmptyWordListError(GameError):
    """A language ended up with no words at load time"""


class InvalidGuessError(GameError):
    """Guess rejected before evaluation (wrong length or unknown word)"""


class GameOverError(GameError):
    """Guess submitted to a game that has already finished"""
