"""
Exceptions raised while loading the review corpus.
Enrichment never raises: collaborators that fail simply leave fields unset.
"""

from pathlib import Path
from typing import Optional, Union


class CorpusError(Exception):
	"""Base class for unrecoverable corpus loading problems."""

	def __init__(self, message: str, source: Optional[Union[str, Path]] = None):
		super().__init__(message)
		self.source = str(source) if source is not None else None  # file or resource name


class ResourceLoadFailure(CorpusError):
	"""The corpus resource could not be located or read."""


class DecodeFailure(CorpusError):
	"""The corpus was read but its content does not match the review schema."""
