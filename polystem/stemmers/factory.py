"""
Factory to create stemmer instances based on configuration.
"""

from typing import Dict, Optional
import logging

from ..config import get_settings
from .base import BaseStemmer
from .snowball import NltkSnowballStemmer
from .strategies import PorterStemmer, SStemmer

logger = logging.getLogger(__name__)

STEMMER_TYPES = ("porter", "s", "snowball")


class StemmerFactory:
    """Factory to create stemmer instances based on configuration."""

    _instances: Dict[str, BaseStemmer] = {}  # Cache, one instance per type (and Snowball language)

    @classmethod
    def create(cls, stemmer_type: Optional[str] = None, force_reload: bool = False) -> BaseStemmer:
        """
        Create stemmer based on argument or environment configuration.

        Config (env vars):
            STEMMER_TYPE: "porter" | "s" | "snowball" (default: porter)
            STEMMER_SNOWBALL_LANGUAGE: Snowball language (default: english)

        Supported types:
            - porter: Classical Porter algorithm (default)
            - s: Plural-only stripper, fastest, over-strips
            - snowball: NLTK Snowball (Porter2), most accurate

        Args:
            stemmer_type: Explicit type, overrides STEMMER_TYPE
            force_reload: If True, recreate instance even if cached

        Returns:
            Stemmer instance

        Raises:
            ValueError: Unknown stemmer type or unsupported language
        """
        settings = get_settings()
        stemmer_type = (stemmer_type or settings.stemmer_type).strip().lower()

        # Snowball instances are per language
        cache_key = stemmer_type
        if stemmer_type == "snowball":
            cache_key = f"snowball:{settings.snowball_language}"

        # Return cached instance
        cached = cls._instances.get(cache_key)
        if cached is not None and not force_reload:
            logger.debug(f"Returning cached stemmer instance: {cached}")
            return cached

        try:
            if stemmer_type == "porter":
                logger.info("Creating Porter stemmer")
                instance = PorterStemmer()

            elif stemmer_type == "s":
                logger.info("Creating S-stemmer")
                instance = SStemmer()

            elif stemmer_type == "snowball":
                logger.info(f"Creating Snowball stemmer: {settings.snowball_language}")
                instance = NltkSnowballStemmer(language=settings.snowball_language)

            else:
                raise ValueError(
                    f"Unknown stemmer type: {stemmer_type}. "
                    f"Valid options: {', '.join(STEMMER_TYPES)}"
                )

        except Exception as e:
            logger.error(f"Failed to create stemmer ({stemmer_type}): {e}")
            raise

        if cached is not None:
            cached.close()
        cls._instances[cache_key] = instance
        return instance

    @classmethod
    def cleanup(cls):
        """Cleanup cached stemmer instances."""
        if cls._instances:
            logger.info(f"Cleaning up {len(cls._instances)} stemmer instance(s)")
        for instance in cls._instances.values():
            instance.close()
        cls._instances.clear()
