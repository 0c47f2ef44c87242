"""
Configuration settings for the Review Engine.

Centralized defaults for the corpus location, language routing and NLP backends.
Every value can be overridden through an environment variable of the same name.
"""

import os
from typing import Optional


def _env_flag(name: str, default: bool) -> bool:
	value = os.getenv(name)
	if value is None:
		return default
	return value.strip().lower() in ('1', 'true', 'yes', 'on')


# Corpus location
PACKAGE_DATA_RESOURCE = 'reviews.json'  # bundled corpus inside review_engine/data

# Explicit corpus file; None means "use the bundled resource"
REVIEW_CORPUS_PATH: Optional[str] = os.getenv('REVIEW_CORPUS_PATH') or None

# Translation routing (reviews in SOURCE_LANGUAGE are translated to TARGET_LANGUAGE)
SOURCE_LANGUAGE = os.getenv('SOURCE_LANGUAGE', 'es')
TARGET_LANGUAGE = os.getenv('TARGET_LANGUAGE', 'en')
ENABLE_TRANSLATION = _env_flag('ENABLE_TRANSLATION', True)
TRANSLATION_MODEL_TEMPLATE = os.getenv('TRANSLATION_MODEL_TEMPLATE', 'Helsinki-NLP/opus-mt-{source}-{target}')

# Sentiment model (configured for exactly one language)
SENTIMENT_LANGUAGE = os.getenv('SENTIMENT_LANGUAGE', 'en')
ENABLE_SENTIMENT = _env_flag('ENABLE_SENTIMENT', True)
SENTIMENT_NEUTRAL_BAND = float(os.getenv('SENTIMENT_NEUTRAL_BAND', '0.05'))  # |compound| below this abstains

# Language detection
LANGUAGE_MIN_CONFIDENCE = float(os.getenv('LANGUAGE_MIN_CONFIDENCE', '0.80'))
LANGUAGE_DETECTOR_SEED = 0  # langdetect is non-deterministic without a seed

# spaCy pipelines
SPACY_NER_MODEL = os.getenv('SPACY_NER_MODEL', 'en_core_web_sm')
SPACY_TOKENIZER_LANG = os.getenv('SPACY_TOKENIZER_LANG', 'xx')  # multi-language tokenizer

# Actor lookup
ACTOR_MATCH_THRESHOLD = int(os.getenv('ACTOR_MATCH_THRESHOLD', '85'))

# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')  # DEBUG, INFO, WARNING, ERROR
