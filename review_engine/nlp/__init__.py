"""
NLP collaborators: capability interfaces plus the default langdetect/spaCy/NLTK/MarianMT backends.
"""

from .base import (
	LanguageDetector,
	PersonNameExtractor,
	SentenceSegmenter,
	SentimentModel,
	Tokenizer,
	Translator,
)
from .toolkit import NLPToolkit, load_default_toolkit

__all__ = [
	'LanguageDetector',
	'PersonNameExtractor',
	'SentenceSegmenter',
	'SentimentModel',
	'Tokenizer',
	'Translator',
	'NLPToolkit',
	'load_default_toolkit',
]
