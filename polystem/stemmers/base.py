"""
Abstract base class for stemming strategies.

All stemmers must implement this interface to be swappable.
"""

from abc import ABC, abstractmethod


class BaseStemmer(ABC):
    """
    Abstract base class for stemming strategies.

    A stemmer maps one token to its stem. Implementations keep no
    per-word state, so one instance can serve any number of callers.
    """

    name: str = ""

    @abstractmethod
    def stem(self, word: str) -> str:
        """
        Reduce a single word to its stem.

        Args:
            word: Single token (no whitespace handling)

        Returns:
            Stemmed word
        """
        pass

    @abstractmethod
    def get_model_info(self) -> dict:
        """
        Get information about the stemming algorithm.

        Returns:
            Dict with keys: name, type, provider (+ strategy-specific keys)
        """
        pass

    def __call__(self, word: str) -> str:
        return self.stem(word)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"

    def close(self):
        """Optional cleanup (release backend resources)"""
        pass
