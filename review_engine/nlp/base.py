"""
Capability interfaces for the NLP collaborators used by the enrichment pipeline.

Each capability is a small abstract class so any NLP/ML library can be plugged in
without touching the pipeline. Implementations must abstain (return None or produce
nothing) instead of raising when they cannot answer.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional


class LanguageDetector(ABC):
	"""Best-effort language guess for a piece of text."""

	@abstractmethod
	def detect(self, text: str) -> Optional[str]:
		"""Return an ISO 639-1 tag, or None when not confident."""


class PersonNameExtractor(ABC):
	"""Finds person names mentioned in text."""

	@abstractmethod
	def person_names(self, text: str) -> Iterable[str]:
		"""Yield zero or more names in text order; duplicates are allowed."""


class SentenceSegmenter(ABC):
	"""Splits text into sentences."""

	@abstractmethod
	def sentences(self, text: str) -> Iterable[str]:
		"""Yield sentence spans in text order."""


class Tokenizer(ABC):
	"""Produces normalized search tokens."""

	@abstractmethod
	def tokens(self, text: str) -> Iterable[str]:
		"""Yield normalized tokens (lower-cased, punctuation removed)."""


class SentimentModel(ABC):
	"""
	A sentiment classifier configured for exactly one language.
	Labels are "neg" for negative; any other label counts as positive.
	"""

	def __init__(self, language: str):
		self.language = language  # the only language this model should be applied to

	@abstractmethod
	def predict(self, text: str) -> Optional[str]:
		"""Return a label such as "pos" / "neg", or None to abstain."""


class Translator(ABC):
	"""Translates a single sentence between two languages."""

	@abstractmethod
	def translate(self, sentence: str, source: str, target: str) -> Optional[str]:
		"""Return the translation, or None on failure."""
