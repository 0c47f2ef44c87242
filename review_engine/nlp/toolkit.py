"""
Bundle of NLP collaborators handed to the enrichment pipeline.
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from .. import settings
from .base import (
	LanguageDetector,
	PersonNameExtractor,
	SentenceSegmenter,
	SentimentModel,
	Tokenizer,
	Translator,
)


@dataclass
class NLPToolkit:
	"""
	The capabilities the pipeline consumes.
	sentiment_model and translator are optional: without them those stages never set a value.
	"""
	language_detector: LanguageDetector
	name_extractor: PersonNameExtractor
	tokenizer: Tokenizer
	sentence_segmenter: SentenceSegmenter
	sentiment_model: Optional[SentimentModel] = None
	translator: Optional[Translator] = None


def load_default_toolkit(
	source_language: str = settings.SOURCE_LANGUAGE,
	enable_sentiment: bool = settings.ENABLE_SENTIMENT,
	enable_translation: bool = settings.ENABLE_TRANSLATION,
) -> NLPToolkit:
	"""
	Build the production toolkit: langdetect, spaCy, VADER and MarianMT.
	Backends are imported here so code running with its own collaborators never loads the ML stack.
	"""
	from .entities import SpacyPersonNameExtractor
	from .language import LangdetectLanguageDetector
	from .sentiment import load_vader_model
	from .text import SpacySentenceSegmenter, SpacyTokenizer

	logger.info("[NLP] Initializing default NLP toolkit...")
	translator = None
	if enable_translation:
		from .translation import MarianTranslator
		translator = MarianTranslator()  # models load lazily on first Spanish review

	toolkit = NLPToolkit(
		language_detector=LangdetectLanguageDetector(),
		name_extractor=SpacyPersonNameExtractor(),
		tokenizer=SpacyTokenizer(),
		sentence_segmenter=SpacySentenceSegmenter(source_language),
		sentiment_model=load_vader_model() if enable_sentiment else None,
		translator=translator,
	)
	logger.info(
		f"[NLP] Toolkit ready | sentiment={'on' if toolkit.sentiment_model else 'off'} | translation={'on' if translator else 'off'}"
	)
	return toolkit
