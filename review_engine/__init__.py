"""
Review Engine: enrichment and indexing of short movie reviews.
"""

from .errors import CorpusError, DecodeFailure, ResourceLoadFailure
from .manager import ReviewsManager, get_manager
from .models import EnrichedReview, Enrichment, ReviewRecord
from .review_store import ReviewStore

__version__ = "1.0.0"

__all__ = [
	'CorpusError',
	'DecodeFailure',
	'ResourceLoadFailure',
	'ReviewsManager',
	'get_manager',
	'EnrichedReview',
	'Enrichment',
	'ReviewRecord',
	'ReviewStore',
]
