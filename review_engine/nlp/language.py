"""
Language detection backed by langdetect.
"""

from typing import Optional

from langdetect import DetectorFactory, detect_langs  # n-gram language identification
from langdetect.lang_detect_exception import LangDetectException  # raised on featureless text

from loguru import logger

from .. import settings
from .base import LanguageDetector


class LangdetectLanguageDetector(LanguageDetector):
	"""
	Wraps langdetect and abstains when the top guess is below a confidence floor.
	The detector factory is seeded so repeated runs give identical answers.
	"""

	def __init__(self, min_confidence: float = settings.LANGUAGE_MIN_CONFIDENCE, seed: int = settings.LANGUAGE_DETECTOR_SEED):
		self.min_confidence = min_confidence  # probability floor for the best guess
		DetectorFactory.seed = seed  # deterministic sampling inside langdetect
		logger.debug(f"[NLP] langdetect ready | min_confidence={min_confidence} seed={seed}")

	def detect(self, text: str) -> Optional[str]:
		if not text or not text.strip():  # nothing to look at
			return None
		try:
			guesses = detect_langs(text)  # sorted by probability, best first
		except LangDetectException as e:
			logger.debug(f"[NLP] Language undetermined: {e}")
			return None
		if not guesses:
			return None
		best = guesses[0]
		if best.prob < self.min_confidence:  # not confident enough
			logger.debug(f"[NLP] Language guess '{best.lang}' below confidence ({best.prob:.2f})")
			return None
		return best.lang
