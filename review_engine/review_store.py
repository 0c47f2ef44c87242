"""
Corpus loading module.
Reads the review corpus (bundled resource or explicit JSON file) and decodes it into ReviewRecords.
"""

# Standard libs for paths, resources and typing
import codecs  # UTF-8 byte order mark
from importlib import resources  # access the bundled corpus inside the package
from pathlib import Path  # filesystem-safe paths
from typing import Any, Dict, Iterable, List, Optional, Union  # type hints

# Pydantic validates the corpus schema for us
from pydantic import BaseModel, ValidationError  # schema definitions

# Console logging
from loguru import logger  # console logger

from . import settings  # default resource name
from .errors import DecodeFailure, ResourceLoadFailure  # fatal load errors
from .models import ReviewRecord  # decoded record type


class ReviewIn(BaseModel):
	"""Schema of one review as stored in the corpus."""
	text: str  # required review text
	movie: str  # required movie title
	actors: Optional[List[str]] = None  # optional actor names


class ReviewEnvelope(BaseModel):
	"""Top-level corpus object: {"reviews": [...]}."""
	reviews: List[ReviewIn]


class ReviewStore:
	"""
	Loads the review corpus once and hands back an ordered list of ReviewRecords.
	Without an explicit path the corpus bundled in review_engine/data is used.
	"""

	def __init__(self, path: Optional[Union[str, Path]] = None):
		"""Remember where to read from; nothing is loaded until load() is called."""
		self.path = Path(path) if path is not None else None  # None -> bundled resource

	@property
	def source(self) -> str:
		"""Human readable name of the corpus location (used in logs and errors)."""
		if self.path is not None:
			return str(self.path)
		return f"review_engine/data/{settings.PACKAGE_DATA_RESOURCE}"

	def load(self) -> List[ReviewRecord]:
		"""
		Read and decode the corpus.
		Raises ResourceLoadFailure when the resource cannot be read and
		DecodeFailure when its content does not match the review schema.
		"""
		logger.info(f"[Store] Loading reviews from {self.source}...")  # log action
		raw = self._read_bytes()  # may raise ResourceLoadFailure
		if raw.startswith(codecs.BOM_UTF8):  # files saved by some editors carry a BOM
			raw = raw[len(codecs.BOM_UTF8):]
		try:
			envelope = ReviewEnvelope.model_validate_json(raw)  # JSON syntax + schema in one pass
		except ValidationError as e:
			raise DecodeFailure(f"Corpus does not match the review schema: {e}", source=self.source) from e

		records = self._to_records(envelope.reviews)
		logger.info(f"[Store] Successfully loaded {len(records)} reviews.")  # summary
		return records

	@classmethod
	def from_records(cls, items: Iterable[Dict[str, Any]]) -> List[ReviewRecord]:
		"""Decode already-parsed review dicts with the same validation as load()."""
		try:
			envelope = ReviewEnvelope.model_validate({'reviews': list(items)})
		except ValidationError as e:
			raise DecodeFailure(f"Reviews do not match the review schema: {e}", source='<records>') from e
		return cls._to_records(envelope.reviews)

	def _read_bytes(self) -> bytes:
		# Explicit file path: validate presence early to give a clear error message
		if self.path is not None:
			if not self.path.is_file():
				raise ResourceLoadFailure(f"Review corpus not found: {self.path}", source=self.path)
			try:
				return self.path.read_bytes()
			except OSError as e:
				raise ResourceLoadFailure(f"Review corpus could not be read: {e}", source=self.path) from e

		# Bundled resource shipped with the package
		resource = resources.files('review_engine') / 'data' / settings.PACKAGE_DATA_RESOURCE
		try:
			return resource.read_bytes()
		except (FileNotFoundError, OSError) as e:
			raise ResourceLoadFailure(f"Bundled review corpus is missing: {e}", source=self.source) from e

	@staticmethod
	def _to_records(reviews: List[ReviewIn]) -> List[ReviewRecord]:
		# Position in the corpus becomes the stable review id
		records = []
		for position, review in enumerate(reviews):
			actors = tuple(review.actors) if review.actors is not None else None  # keep "absent" distinct from "empty"
			records.append(ReviewRecord(review_id=position, text=review.text, movie=review.movie, actors=actors))
		return records
