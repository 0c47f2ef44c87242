"""
Shared fixtures: deterministic stand-ins for the NLP collaborators and small corpora.
"""

import json
import re

import pytest

from review_engine.manager import ReviewsManager
from review_engine.nlp.base import (
	LanguageDetector,
	PersonNameExtractor,
	SentenceSegmenter,
	SentimentModel,
	Tokenizer,
	Translator,
)
from review_engine.nlp.toolkit import NLPToolkit
from review_engine.review_store import ReviewStore


class FakeLanguageDetector(LanguageDetector):
	def __init__(self, languages=None):
		self.languages = languages or {}  # text -> tag; anything else abstains
		self.calls = []

	def detect(self, text):
		self.calls.append(text)
		return self.languages.get(text)


class FakeNameExtractor(PersonNameExtractor):
	def __init__(self, names=None):
		self.names = names or {}  # text -> list of names

	def person_names(self, text):
		for name in self.names.get(text, []):
			yield name


class FakeTokenizer(Tokenizer):
	def tokens(self, text):
		for word in re.findall(r"\w+", text.lower()):
			yield word


class FakeSegmenter(SentenceSegmenter):
	def sentences(self, text):
		for sentence in re.split(r"(?<=[.!?])", text):
			if sentence.strip():
				yield sentence


class FakeSentimentModel(SentimentModel):
	def __init__(self, language="en", labels=None):
		super().__init__(language)
		self.labels = labels or {}  # text -> label; anything else abstains
		self.calls = []

	def predict(self, text):
		self.calls.append(text)
		return self.labels.get(text)


class FakeTranslator(Translator):
	def __init__(self, translations=None):
		self.translations = translations or {}  # sentence -> translation
		self.calls = []

	def translate(self, sentence, source, target):
		self.calls.append((sentence, source, target))
		return self.translations.get(sentence)


CORPUS = {
	"reviews": [
		{"movie": "Nope", "text": "Great film, loved it", "actors": []},
		{"movie": "Roma", "text": "Me gustó mucho", "actors": []},
		{"movie": "Nope", "text": "Keke Palmer was great. Keke Palmer again!", "actors": ["Daniel Kaluuya"]},
		{"movie": "Arrival", "text": "Terrible and slow"},
		{"movie": "Roma", "text": "La historia. Es lenta."},
		{"movie": "Arrival", "text": "???"},
	]
}


def make_toolkit(sentiment=True, translation=True):
	"""Collaborators answering for the sample CORPUS above."""
	return NLPToolkit(
		language_detector=FakeLanguageDetector({
			"Great film, loved it": "en",
			"Me gustó mucho": "es",
			"Keke Palmer was great. Keke Palmer again!": "en",
			"Terrible and slow": "en",
			"La historia. Es lenta.": "es",
		}),
		name_extractor=FakeNameExtractor({
			"Keke Palmer was great. Keke Palmer again!": ["Keke Palmer", "Keke Palmer"],
		}),
		tokenizer=FakeTokenizer(),
		sentence_segmenter=FakeSegmenter(),
		sentiment_model=FakeSentimentModel("en", {
			"Great film, loved it": "pos",
			"Terrible and slow": "neg",
		}) if sentiment else None,
		translator=FakeTranslator({
			"Me gustó mucho": "I liked it a lot",
			"La historia.": "The story.",
		}) if translation else None,
	)


@pytest.fixture
def toolkit():
	return make_toolkit()


@pytest.fixture
def corpus_file(tmp_path):
	path = tmp_path / "reviews.json"
	path.write_text(json.dumps(CORPUS, ensure_ascii=False), encoding="utf-8")
	return path


@pytest.fixture
def manager(corpus_file, toolkit):
	return ReviewsManager(store=ReviewStore(corpus_file), toolkit=toolkit)
