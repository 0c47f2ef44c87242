"""
Sentiment classification with NLTK's VADER lexicon (English).
"""

from typing import Optional

import nltk  # lexicon download
from nltk.sentiment.vader import SentimentIntensityAnalyzer  # rule-based polarity scores

from loguru import logger

from .. import settings
from .base import SentimentModel


class VaderSentimentModel(SentimentModel):
	"""
	Maps VADER's compound score to "pos" / "neg".
	Scores inside the neutral band abstain, so mixed reviews keep no sentiment.
	"""

	def __init__(
		self,
		analyzer: SentimentIntensityAnalyzer,
		language: str = settings.SENTIMENT_LANGUAGE,
		neutral_band: float = settings.SENTIMENT_NEUTRAL_BAND,
	):
		super().__init__(language)
		self.analyzer = analyzer  # ready VADER analyzer
		self.neutral_band = neutral_band  # |compound| below this -> no label

	def predict(self, text: str) -> Optional[str]:
		if not text or not text.strip():
			return None
		compound = self.analyzer.polarity_scores(text)['compound']
		if compound >= self.neutral_band:
			return 'pos'
		if compound <= -self.neutral_band:
			return 'neg'
		return None  # neutral


def load_vader_model(
	language: str = settings.SENTIMENT_LANGUAGE,
	neutral_band: float = settings.SENTIMENT_NEUTRAL_BAND,
) -> Optional[VaderSentimentModel]:
	"""
	Build the VADER model, fetching the lexicon on first use.
	Returns None when the lexicon is unavailable; callers then run without sentiment.
	"""
	try:
		nltk.download('vader_lexicon', quiet=True)
		analyzer = SentimentIntensityAnalyzer()
	except Exception as e:
		logger.warning(f"[NLP] VADER lexicon unavailable, sentiment disabled: {e}")
		return None
	logger.info(f"[NLP] VADER sentiment model ready | language={language} band={neutral_band}")
	return VaderSentimentModel(analyzer, language=language, neutral_band=neutral_band)
