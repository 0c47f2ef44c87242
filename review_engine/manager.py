"""
Reviews manager module.
Loads the corpus once, enriches and indexes every review, and exposes read-only views.
"""

import threading  # one-time initialization guard
import time  # measure initialization cost
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple  # type annotations

from rapidfuzz import fuzz, process, utils  # fuzzy actor-name resolution

from loguru import logger

from . import settings
from .index_builder import IndexSnapshot, ReviewIndex
from .models import EnrichedReview
from .nlp.toolkit import NLPToolkit, load_default_toolkit
from .pipeline import EnrichmentPipeline
from .review_store import ReviewStore


class ReviewsManager:
	"""
	Facade over the corpus and its indices.
	Construction is cheap; the first read (or an explicit initialize()) loads the corpus,
	runs the enrichment pipeline on each review and registers it before moving to the next.
	"""

	def __init__(
		self,
		store: Optional[ReviewStore] = None,  # corpus source (bundled resource by default)
		toolkit: Optional[NLPToolkit] = None,  # collaborators; default backends when None
		source_language: str = settings.SOURCE_LANGUAGE,
		target_language: str = settings.TARGET_LANGUAGE,
		actor_match_threshold: int = settings.ACTOR_MATCH_THRESHOLD,
	):
		self.store = store or ReviewStore(settings.REVIEW_CORPUS_PATH)
		self.source_language = source_language
		self.target_language = target_language
		self.actor_match_threshold = actor_match_threshold
		self._toolkit = toolkit
		self._lock = threading.Lock()
		self._initialized = False
		self._reviews: Tuple[EnrichedReview, ...] = ()
		self._snapshot: Optional[IndexSnapshot] = None
		self.startup_seconds = 0.0  # time spent in initialize()

	@property
	def initialized(self) -> bool:
		return self._initialized

	def initialize(self):
		"""
		Load, enrich and index the corpus exactly once.
		Concurrent first callers block until the first one finishes; later calls return immediately.
		ResourceLoadFailure / DecodeFailure propagate to the caller.
		"""
		if self._initialized:
			return
		with self._lock:
			if self._initialized:  # another thread finished while we waited
				return
			start = time.time()
			records = self.store.load()
			if self._toolkit is None:
				self._toolkit = load_default_toolkit(source_language=self.source_language)
			pipeline = EnrichmentPipeline(self._toolkit, self.source_language, self.target_language)
			index = ReviewIndex()

			logger.info(f"[Manager] Enriching and indexing {len(records)} reviews...")
			reviews: List[EnrichedReview] = []
			for record in records:
				enriched = pipeline.enrich(record)  # all stages first...
				index.add(enriched)  # ...then register, before the next review
				reviews.append(enriched)

			self._reviews = tuple(reviews)
			self._snapshot = index.snapshot()
			self.startup_seconds = time.time() - start
			self._initialized = True
			logger.info(f"[Manager] Ready in {self.startup_seconds:.2f}s | {self._summary_line()}")

	def _state(self) -> IndexSnapshot:
		self.initialize()
		return self._snapshot

	# Read-only surface

	@property
	def reviews(self) -> Tuple[EnrichedReview, ...]:
		self.initialize()
		return self._reviews

	@property
	def search_index(self) -> Mapping[str, FrozenSet[int]]:
		return self._state().search_index

	@property
	def by_movie(self) -> Mapping[str, Tuple[EnrichedReview, ...]]:
		return self._state().by_movie

	@property
	def by_actor(self) -> Mapping[str, Tuple[EnrichedReview, ...]]:
		return self._state().by_actor

	@property
	def by_language(self) -> Mapping[str, Tuple[EnrichedReview, ...]]:
		return self._state().by_language

	# Convenience reads

	def get_review(self, review_id: int) -> Optional[EnrichedReview]:
		"""Return the review with this id, or None if out of range."""
		reviews = self.reviews
		if 0 <= review_id < len(reviews):
			return reviews[review_id]  # ids are corpus positions
		return None

	def reviews_for_term(self, term: str) -> Tuple[EnrichedReview, ...]:
		"""Reviews whose search terms contain this exact (already normalized) token, in corpus order."""
		ids = self.search_index.get(term, frozenset())
		return tuple(self._reviews[i] for i in sorted(ids))

	def search(self, query: str) -> Tuple[EnrichedReview, ...]:
		"""
		Reviews containing every token of the query, in corpus order.
		The query goes through the same tokenizer as the reviews; no scoring is applied.
		"""
		index = self.search_index  # initializes on first use
		terms = list(dict.fromkeys(self._toolkit.tokenizer.tokens(query)))  # dedupe, keep order
		if not terms:
			return ()
		matched: Optional[FrozenSet[int]] = None
		for term in terms:
			ids = index.get(term, frozenset())
			matched = ids if matched is None else matched & ids
			if not matched:
				logger.debug(f"[Manager] Search '{query}' stopped at term '{term}' (no matches)")
				return ()
		return tuple(self._reviews[i] for i in sorted(matched))

	def reviews_for_movie(self, movie: str) -> Tuple[EnrichedReview, ...]:
		return self.by_movie.get(movie, ())

	def reviews_for_actor(self, actor: str) -> Tuple[EnrichedReview, ...]:
		return self.by_actor.get(actor, ())

	def reviews_for_language(self, language: str) -> Tuple[EnrichedReview, ...]:
		return self.by_language.get(language, ())

	def find_actor(self, name: str) -> Optional[str]:
		"""
		Resolve a user-typed actor name to an indexed actor key.
		Exact match first, then case-insensitive, then the best fuzzy match above the threshold.
		"""
		if not name or not name.strip():
			return None
		by_actor = self.by_actor
		if name in by_actor:
			return name
		wanted = name.strip().lower()
		for actor in by_actor:
			if actor.lower() == wanted:
				return actor
		best = process.extractOne(
			name,
			list(by_actor.keys()),
			scorer=fuzz.WRatio,
			processor=utils.default_process,
			score_cutoff=self.actor_match_threshold,
		)
		if best is None:
			logger.debug(f"[Manager] No actor matches '{name}'")
			return None
		logger.debug(f"[Manager] Actor fuzzy match: '{name}' -> '{best[0]}' (score={best[1]:.1f})")
		return best[0]

	def summary(self) -> Dict[str, Any]:
		"""Counts describing the corpus and each index."""
		state = self._state()
		return {
			'reviews': len(self._reviews),
			'movies': len(state.by_movie),
			'actors': len(state.by_actor),
			'languages': {lang: len(items) for lang, items in state.by_language.items()},
			'search_terms': len(state.search_index),
			'with_sentiment': sum(1 for r in self._reviews if r.sentiment is not None),
			'translated': sum(1 for r in self._reviews if r.translated_text is not None),
		}

	def _summary_line(self) -> str:
		s = self.summary()
		return (
			f"reviews={s['reviews']} movies={s['movies']} actors={s['actors']} "
			f"languages={s['languages']} terms={s['search_terms']} "
			f"sentiment={s['with_sentiment']} translated={s['translated']}"
		)


_MANAGER: Optional[ReviewsManager] = None  # shared instance for get_manager()
_MANAGER_LOCK = threading.Lock()


def get_manager() -> ReviewsManager:
	"""
	Return the shared, fully initialized manager, creating it on first call.
	Prefer constructing a ReviewsManager and passing it around; this exists for the HTTP app.
	"""
	global _MANAGER
	with _MANAGER_LOCK:
		if _MANAGER is None:
			_MANAGER = ReviewsManager()
	_MANAGER.initialize()
	return _MANAGER
