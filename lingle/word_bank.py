"""
Per-language word lists for the daily word game
"""

import logging
import unicodedata
from collections.abc import Iterable
from pathlib import Path

from .config import get_settings
from .errors import EmptyWordListError, UnsupportedLanguageError

logger = logging.getLogger(__name__)


def normalize_word(word: str) -> str:
    """Lowercase a word and compose accents (NFC) so lookups compare equal"""
    if not word:
        return ""
    return unicodedata.normalize("NFC", word.lower())


def load_word_list(path: str | Path) -> list[str]:
    """Load one word per line, keeping file order"""
    words = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            word = normalize_word(line.strip())
            if word:
                words.append(word)
    return words


class WordBank:
    """Ordered, read-only word lists keyed by language code"""

    def __init__(self, word_lists: dict[str, Iterable[str]]):
        self._words: dict[str, tuple[str, ...]] = {}
        self._lookup: dict[str, frozenset[str]] = {}

        for language, words in word_lists.items():
            normalized = tuple(w for w in (normalize_word(w.strip()) for w in words) if w)
            if not normalized:
                raise EmptyWordListError(f"Word list for {language!r} is empty")
            self._words[language] = normalized
            self._lookup[language] = frozenset(normalized)

        logger.debug(
            "Word bank ready: "
            + ", ".join(f"{lang}={len(words)}" for lang, words in self._words.items())
        )

    @classmethod
    def from_directory(cls, words_dir: str | Path, languages: list[str]) -> "WordBank":
        """Load `<language>.txt` for every requested language"""
        words_dir = Path(words_dir)
        word_lists = {}

        for language in languages:
            path = words_dir / f"{language}.txt"
            if not path.is_file():
                raise EmptyWordListError(f"No word list file for {language!r} at {path}")

            word_lists[language] = load_word_list(path)
            logger.info(f"Loaded {len(word_lists[language])} words for {language} from {path}")

        return cls(word_lists)

    @property
    def languages(self) -> list[str]:
        """Language codes in load order"""
        return list(self._words)

    def supports(self, language: str) -> bool:
        return language in self._words

    def words(self, language: str) -> tuple[str, ...]:
        """Get the ordered word list for a language"""
        try:
            return self._words[language]
        except KeyError:
            raise UnsupportedLanguageError(language) from None

    def is_valid_word(self, language: str, guess: str) -> bool:
        """Check whether a guess appears in the language's word list"""
        if language not in self._lookup:
            raise UnsupportedLanguageError(language)
        return normalize_word(guess) in self._lookup[language]

    def __len__(self) -> int:
        return len(self._words)


# Global instance
_word_bank = None


def get_word_bank() -> WordBank:
    """Get global word bank loaded from the configured words directory"""
    global _word_bank
    if _word_bank is None:
        settings = get_settings()
        _word_bank = WordBank.from_directory(
            settings.words_dir, settings.supported_languages_list
        )
    return _word_bank
