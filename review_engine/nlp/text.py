"""
Text segmentation backed by spaCy blank pipelines.
Rule-based only, so no trained model has to be downloaded.
"""

from typing import Iterator

import spacy  # tokenizer and rule-based sentencizer

from loguru import logger

from .. import settings
from .base import SentenceSegmenter, Tokenizer


class SpacyTokenizer(Tokenizer):
	"""
	Produces search tokens: lower-cased words with punctuation and whitespace removed.
	Uses the multi-language tokenizer by default so every review language is handled alike.
	"""

	def __init__(self, lang: str = settings.SPACY_TOKENIZER_LANG):
		self.lang = lang
		self._nlp = spacy.blank(lang)  # tokenizer only
		logger.debug(f"[NLP] spaCy tokenizer ready | lang={lang}")

	def tokens(self, text: str) -> Iterator[str]:
		if not text:
			return
		for token in self._nlp.make_doc(text):
			if token.is_punct or token.is_space:  # not searchable
				continue
			if not any(ch.isalnum() for ch in token.text):  # symbols, dashes, emoji
				continue
			yield token.lower_


# Marks that open a sentence (Spanish questions and exclamations)
OPENING_MARKS = {'¿', '¡'}


class SpacySentenceSegmenter(SentenceSegmenter):
	"""
	Splits text into sentences with spaCy's punctuation-based sentencizer.
	The sentencizer glues punctuation following a sentence end onto that sentence,
	so opening marks such as "¿" / "¡" are handed back to the sentence they open.
	"""

	def __init__(self, lang: str = settings.SOURCE_LANGUAGE):
		self.lang = lang
		self._nlp = spacy.blank(lang)  # language-specific punctuation rules
		self._nlp.add_pipe('sentencizer')
		logger.debug(f"[NLP] spaCy sentencizer ready | lang={lang}")

	def sentences(self, text: str) -> Iterator[str]:
		if not text or not text.strip():
			return
		doc = self._nlp(text)
		sents = list(doc.sents)
		start = 0  # char offset where the current sentence begins
		for position, sent in enumerate(sents):
			if position == len(sents) - 1:
				cut = sent.end_char  # last sentence keeps everything
			else:
				cut = sent.end_char
				k = sent.end - 1
				while k >= sent.start and doc[k].text in OPENING_MARKS:  # trailing opening marks
					cut = doc[k].idx
					k -= 1
			sentence = text[start:cut].strip()
			if sentence:
				yield sentence
			start = max(start, cut)
