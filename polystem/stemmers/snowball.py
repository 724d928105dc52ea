"""
Snowball stemmer (via NLTK).

Uses the Snowball stemming algorithm (improved Porter2 stemmer):
https://snowballstem.org/

Snowball is more accurate than the original Porter stemmer:
- Better handling of word endings
- More consistent stem generation
- Used by Elasticsearch, Solr, Lucene

Examples:
- "architectures" → "architectur"
- "strategies" → "strategi"
- "running" → "run"
"""

import logging

from nltk.stem.snowball import SnowballStemmer

from .base import BaseStemmer

logger = logging.getLogger(__name__)


class NltkSnowballStemmer(BaseStemmer):
    """
    Snowball stemmer adapter.

    The NLTK stemmer is created once per instance (thread-safe, reusable).
    """

    name = "snowball"

    def __init__(self, language: str = "english"):
        """
        Initialize Snowball stemmer.

        Args:
            language: Any language in SnowballStemmer.languages
                - 'english' (Porter2, default)
                - 'porter' (NLTK's Porter variant)
                - 'german', 'french', 'russian', ...

        Raises:
            ValueError: If NLTK has no Snowball stemmer for the language
        """
        language = language.lower()
        if language not in SnowballStemmer.languages:
            raise ValueError(
                f"Unsupported Snowball language: {language}. "
                f"Valid options: {', '.join(SnowballStemmer.languages)}"
            )
        self.language = language
        self._stemmer = SnowballStemmer(language)
        logger.info(f"NltkSnowballStemmer initialized: language={language}")

    def stem(self, word: str) -> str:
        """
        Stem a single word using the Snowball algorithm.

        Examples:
            >>> NltkSnowballStemmer().stem("searching")
            'search'
        """
        return self._stemmer.stem(word)

    def get_model_info(self) -> dict:
        return {
            "name": self.name,
            "type": "snowball",
            "provider": "nltk",
            "language": self.language,
        }
