"""
Index building module.
Registers enriched reviews into the movie, actor, language and search-term lookups.
"""

from dataclasses import dataclass  # read-only snapshot container
from types import MappingProxyType  # read-only dict views
from typing import Dict, FrozenSet, List, Mapping, Set, Tuple  # type hints

from loguru import logger

from .models import EnrichedReview


@dataclass(frozen=True)
class IndexSnapshot:
	"""Immutable views of every index, safe to hand to consumers."""
	by_movie: Mapping[str, Tuple[EnrichedReview, ...]]
	by_actor: Mapping[str, Tuple[EnrichedReview, ...]]
	by_language: Mapping[str, Tuple[EnrichedReview, ...]]
	search_index: Mapping[str, FrozenSet[int]]  # token -> review ids


class ReviewIndex:
	"""
	Append-only lookups over enriched reviews.
	- by_movie / by_actor / by_language keep insertion (corpus) order
	- search_index stores review ids, so a token registers a review once
	"""

	def __init__(self):
		self.by_movie: Dict[str, List[EnrichedReview]] = {}
		self.by_actor: Dict[str, List[EnrichedReview]] = {}
		self.by_language: Dict[str, List[EnrichedReview]] = {}
		self.search_index: Dict[str, Set[int]] = {}
		self.size = 0  # number of reviews registered

	def add(self, review: EnrichedReview):
		"""Register one fully enriched review in every index it belongs to."""
		self._add_movie(review)
		self._add_actors(review)
		self._add_language(review)
		self._add_search_terms(review)
		self.size += 1

	def _add_movie(self, review: EnrichedReview):
		self.by_movie.setdefault(review.movie, []).append(review)

	def _add_actors(self, review: EnrichedReview):
		# A name listed twice registers the review twice
		for actor in review.actors or ():
			self.by_actor.setdefault(actor, []).append(review)

	def _add_language(self, review: EnrichedReview):
		if review.language is None:
			return
		self.by_language.setdefault(review.language, []).append(review)

	def _add_search_terms(self, review: EnrichedReview):
		for term in review.search_terms:
			self.search_index.setdefault(term, set()).add(review.review_id)

	def snapshot(self) -> IndexSnapshot:
		"""Freeze the current state into read-only views."""
		snapshot = IndexSnapshot(
			by_movie=MappingProxyType({k: tuple(v) for k, v in self.by_movie.items()}),
			by_actor=MappingProxyType({k: tuple(v) for k, v in self.by_actor.items()}),
			by_language=MappingProxyType({k: tuple(v) for k, v in self.by_language.items()}),
			search_index=MappingProxyType({k: frozenset(v) for k, v in self.search_index.items()}),
		)
		logger.debug(
			f"[Index] Snapshot | reviews={self.size} movies={len(self.by_movie)} actors={len(self.by_actor)} "
			f"languages={len(self.by_language)} terms={len(self.search_index)}"
		)
		return snapshot
