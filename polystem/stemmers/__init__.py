"""
Stemming strategies for polystem.

Usage:
    # Get stemmer (auto-configured from env):
    from polystem.stemmers import get_stemmer

    stemmer = get_stemmer()
    stemmer.stem("ponies")  # 'poni'

    # Or create specific implementation:
    from polystem.stemmers import NltkSnowballStemmer

    stemmer = NltkSnowballStemmer("english")
    stemmer.stem("ponies")  # 'poni'
"""

from typing import Optional
from .base import BaseStemmer
from .porter import PorterReducer, stem
from .s_stemmer import simple_strip
from .strategies import PorterStemmer, SStemmer
from .snowball import NltkSnowballStemmer
from .factory import StemmerFactory, STEMMER_TYPES


def get_stemmer(stemmer_type: Optional[str] = None, force_reload: bool = False) -> BaseStemmer:
    """
    Get configured stemmer instance (factory convenience function).

    Uses STEMMER_TYPE when stemmer_type is not given.
    """
    return StemmerFactory.create(stemmer_type=stemmer_type, force_reload=force_reload)


__all__ = [
    'BaseStemmer',
    'PorterReducer',
    'PorterStemmer',
    'SStemmer',
    'NltkSnowballStemmer',
    'StemmerFactory',
    'STEMMER_TYPES',
    'get_stemmer',
    'stem',
    'simple_strip',
]
