"""
polystem - a collection of common stemming algorithms.

Reduces one word at a time to its stem for indexing and search matching.

Components:
- stemmers.porter: Classical Porter algorithm ("caresses" → "caress")
- stemmers.s_stemmer: Plural-only stripper ("flies" → "fly")
- stemmers.snowball: NLTK Snowball (Porter2) adapter
- stemmers.factory: Strategy selection from STEMMER_TYPE
- config / logging_config: Environment loading and log setup

All stemmers are pure functions of the input word: no shared state,
safe to call from any number of threads.
"""

from .stemmers import (
    BaseStemmer,
    NltkSnowballStemmer,
    PorterStemmer,
    SStemmer,
    StemmerFactory,
    get_stemmer,
    simple_strip,
    stem,
)
from .config import Settings, get_settings, init_from_environment, load_environment
from .logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    "stem",
    "simple_strip",
    "get_stemmer",
    "BaseStemmer",
    "PorterStemmer",
    "SStemmer",
    "NltkSnowballStemmer",
    "StemmerFactory",
    "Settings",
    "get_settings",
    "load_environment",
    "init_from_environment",
    "setup_logging",
]
