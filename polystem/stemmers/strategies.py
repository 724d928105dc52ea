"""Built-in stemming strategies backed by the algorithms in this package."""

from .base import BaseStemmer
from .porter import MIN_STEM_LENGTH, stem
from .s_stemmer import simple_strip


class PorterStemmer(BaseStemmer):
    """Classical Porter (1980) suffix stripping."""

    name = "porter"

    def stem(self, word: str) -> str:
        return stem(word)

    def get_model_info(self) -> dict:
        return {
            "name": self.name,
            "type": "porter",
            "provider": "polystem",
            "min_length": MIN_STEM_LENGTH + 1,
        }


class SStemmer(BaseStemmer):
    """Plural-only stripper ("ies" / "es" / "s")."""

    name = "s"

    def stem(self, word: str) -> str:
        return simple_strip(word)

    def get_model_info(self) -> dict:
        return {
            "name": self.name,
            "type": "s_stemmer",
            "provider": "polystem",
            "suffixes": ["ies", "es", "s"],
        }
