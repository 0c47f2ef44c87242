"""
Enrichment pipeline module.
Runs language detection, name extraction, search tokenization, sentiment and translation for one review.
"""

from typing import Callable, List  # type annotations

# Console logging
from loguru import logger

from . import settings  # language routing defaults
from .models import EnrichedReview, Enrichment, ReviewRecord  # records and accumulator
from .nlp.toolkit import NLPToolkit  # collaborators

# A stage reads the immutable record and returns the updated accumulator
Stage = Callable[[ReviewRecord, Enrichment], Enrichment]

NEGATIVE_LABEL = 'neg'  # every other label counts as positive


class EnrichmentPipeline:
	"""
	Applies the enrichment stages to a review in a fixed order:
	language -> person names -> search terms -> sentiment -> translation.
	Sentiment and translation depend on the detected language, so ordering matters.
	"""

	def __init__(
		self,
		toolkit: NLPToolkit,
		source_language: str = settings.SOURCE_LANGUAGE,
		target_language: str = settings.TARGET_LANGUAGE,
	):
		self.toolkit = toolkit  # NLP collaborators
		self.source_language = source_language  # reviews in this language get translated
		self.target_language = target_language  # ...into this one
		self.stages: List[Stage] = [
			self.set_language,
			self.get_names,
			self.populate_search,
			self.find_sentiment,
			self.translate_review,
		]

	def enrich(self, record: ReviewRecord) -> EnrichedReview:
		"""Run every stage on one record and merge the result into an EnrichedReview."""
		enrichment = Enrichment.for_record(record)  # seeded with source actors
		for stage in self.stages:
			enrichment = stage(record, enrichment)
		enriched = EnrichedReview.merge(record, enrichment)
		logger.debug(
			f"[Pipeline] Review {record.review_id} | language={enriched.language} | actors={len(enriched.actors or ())} "
			f"| terms={len(enriched.search_terms)} | sentiment={enriched.sentiment} | translated={enriched.translated_text is not None}"
		)
		return enriched

	def set_language(self, record: ReviewRecord, enrichment: Enrichment) -> Enrichment:
		# None when the detector abstains; the review then skips sentiment and translation
		enrichment.language = self.toolkit.language_detector.detect(record.text)
		return enrichment

	def get_names(self, record: ReviewRecord, enrichment: Enrichment) -> Enrichment:
		# Extracted names are appended after the source actors, duplicates included
		for name in self.toolkit.name_extractor.person_names(record.text):
			if enrichment.actors is None:
				enrichment.actors = []
			enrichment.actors.append(name)
		return enrichment

	def populate_search(self, record: ReviewRecord, enrichment: Enrichment) -> Enrichment:
		enrichment.search_terms.extend(self.toolkit.tokenizer.tokens(record.text))
		return enrichment

	def find_sentiment(self, record: ReviewRecord, enrichment: Enrichment) -> Enrichment:
		model = self.toolkit.sentiment_model
		# The model is only trusted for the one language it was built for
		if model is None or enrichment.language is None or enrichment.language != model.language:
			return enrichment
		prediction = model.predict(record.text)
		if prediction is not None:
			enrichment.sentiment = 0 if prediction == NEGATIVE_LABEL else 1
		return enrichment

	def translate_review(self, record: ReviewRecord, enrichment: Enrichment) -> Enrichment:
		translator = self.toolkit.translator
		if translator is None or enrichment.language != self.source_language:
			return enrichment
		translated_text = ''
		for sentence in self.toolkit.sentence_segmenter.sentences(record.text):
			translation = translator.translate(sentence.strip(), self.source_language, self.target_language)
			if translation:  # failed sentences are dropped
				translated_text += f"{translation} "
		if translated_text:
			enrichment.translated_text = translated_text
		return enrichment
