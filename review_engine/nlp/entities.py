"""
Person name extraction using spaCy named entity recognition.
"""

from typing import Iterator, Optional

import spacy  # NLP pipeline for named entities

from loguru import logger

from .. import settings
from .base import PersonNameExtractor

# English models tag people as PERSON, the multilingual/WikiNER models as PER
PERSON_LABELS = {'PERSON', 'PER'}


class SpacyPersonNameExtractor(PersonNameExtractor):
	"""
	Yields PERSON entities found by a trained spaCy pipeline.
	If the model is not installed the extractor stays usable but finds no names.
	"""

	def __init__(self, model_name: str = settings.SPACY_NER_MODEL):
		self.model_name = model_name
		self._nlp: Optional[spacy.language.Language] = None
		try:
			# Only the NER component is needed
			self._nlp = spacy.load(model_name, exclude=['lemmatizer', 'textcat'])
			logger.info(f"[NLP] spaCy model {model_name} loaded for person names")
		except Exception as e:
			logger.warning(f"[NLP] spaCy load failed, person name extraction disabled: {e}")
			self._nlp = None

	@property
	def available(self) -> bool:
		return self._nlp is not None

	def person_names(self, text: str) -> Iterator[str]:
		if self._nlp is None or not text:
			return
		doc = self._nlp(text)
		for ent in doc.ents:
			if ent.label_ in PERSON_LABELS:
				name = ent.text.strip()
				if name:
					yield name
