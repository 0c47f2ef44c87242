"""
Data models for the Review Engine.
Defines the review records that flow through enrichment and indexing.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Import typing helpers for precise and self-documenting types
from typing import Any, Dict, FrozenSet, List, Optional, Tuple  # containers and optional values


@dataclass(frozen=True)
class ReviewRecord:
	"""
	One review exactly as it was decoded from the corpus.
	Never mutated; enrichment results live in an Enrichment accumulator.
	"""
	review_id: int  # zero-based position in the corpus (stable identity)
	text: str  # raw review text
	movie: str  # title of the reviewed film
	actors: Optional[Tuple[str, ...]] = None  # actor names supplied by the source, if any


@dataclass
class Enrichment:
	"""
	Per-review accumulator threaded through the enrichment stages.
	Every field is optional: a stage that abstains simply leaves its field unset.
	"""
	language: Optional[str] = None  # ISO 639-1 tag from language detection
	actors: Optional[List[str]] = None  # source actors followed by extracted names
	search_terms: List[str] = field(default_factory=list)  # normalized tokens in text order
	sentiment: Optional[int] = None  # 0 = negative, 1 = positive
	translated_text: Optional[str] = None  # translation of source-language text

	@classmethod
	def for_record(cls, record: ReviewRecord) -> 'Enrichment':
		"""Start an accumulator seeded with the record's own actor list."""
		actors = list(record.actors) if record.actors is not None else None
		return cls(actors=actors)


@dataclass(frozen=True)
class EnrichedReview:
	"""
	Final, read-only view of a review after every enrichment stage ran.
	"""
	review_id: int  # same id as the source ReviewRecord
	text: str  # original text, untouched by enrichment
	movie: str  # original movie title
	actors: Optional[Tuple[str, ...]] = None  # post-extraction actors (duplicates kept)
	language: Optional[str] = None  # detected language, if confident
	sentiment: Optional[int] = None  # sentiment label, if a matching model answered
	translated_text: Optional[str] = None  # translated text, if any sentence translated
	search_terms: FrozenSet[str] = frozenset()  # distinct search tokens

	@classmethod
	def merge(cls, record: ReviewRecord, enrichment: Enrichment) -> 'EnrichedReview':
		"""Combine the immutable input with its finished accumulator."""
		return cls(
			review_id=record.review_id,
			text=record.text,
			movie=record.movie,
			actors=tuple(enrichment.actors) if enrichment.actors is not None else None,
			language=enrichment.language,
			sentiment=enrichment.sentiment,
			translated_text=enrichment.translated_text,
			search_terms=frozenset(enrichment.search_terms),
		)

	def to_dict(self) -> Dict[str, Any]:
		"""Plain JSON-friendly representation (search terms sorted for stable output)."""
		return {
			'id': self.review_id,
			'text': self.text,
			'movie': self.movie,
			'actors': list(self.actors) if self.actors is not None else None,
			'language': self.language,
			'sentiment': self.sentiment,
			'translated_text': self.translated_text,
			'search_terms': sorted(self.search_terms),
		}
