"""
FastAPI server exposing the enriched review corpus (read-only).
Endpoints:
- GET /health: readiness, startup time and index counts
- GET /reviews?language=...&movie=...: enriched reviews, optionally filtered
- GET /reviews/{review_id}: one review
- GET /search?q=...: reviews containing every query token (membership only, corpus order)
- GET /movies, /movies/{movie}/reviews
- GET /actors, /actors/{name}/reviews (fuzzy actor name resolution)
- GET /languages, /languages/{language}/reviews

Startup loads the corpus and runs enrichment once; a corpus that cannot be loaded aborts startup.
"""

# Standard libraries for timing and typing
import time  # measure request latencies
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, HTTPException, Query  # FastAPI primitives
from pydantic import BaseModel  # response schema definitions

# Import our internal modules
from review_engine.errors import CorpusError  # fatal corpus errors
from review_engine.manager import ReviewsManager, get_manager  # enrichment + indices facade
from review_engine.models import EnrichedReview  # review record

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Instantiate the FastAPI application with metadata
app = FastAPI(title="Review Engine API", version="1.0.0")  # web app

# Global that holds the manager instance once startup has run
MANAGER: Optional[ReviewsManager] = None  # will point to the initialized manager


# Pydantic model that describes a single enriched review in responses
class ReviewOut(BaseModel):
	id: int  # corpus position
	movie: str  # reviewed film
	text: str  # original review text
	actors: Optional[List[str]] = None  # source + extracted actor names
	language: Optional[str] = None  # detected language
	sentiment: Optional[int] = None  # 0 negative / 1 positive
	translated_text: Optional[str] = None  # translation, when available


# Pydantic model for a list of reviews under some key
class ReviewListResponse(BaseModel):
	key: Optional[str] = None  # movie / actor / language / query the list belongs to
	count: int  # number of reviews returned
	results: List[ReviewOut]  # reviews in corpus order


# Pydantic model for search results
class SearchResponse(BaseModel):
	query: str  # original query string
	elapsed_ms: float  # server-side lookup time in ms
	count: int  # number of matching reviews
	results: List[ReviewOut]  # matching reviews


# Pydantic model for key listings (movies, actors, languages)
class KeyCount(BaseModel):
	key: str  # index key
	count: int  # number of reviews under the key


def _review_out(review: EnrichedReview) -> ReviewOut:
	return ReviewOut(
		id=review.review_id,
		movie=review.movie,
		text=review.text,
		actors=list(review.actors) if review.actors is not None else None,
		language=review.language,
		sentiment=review.sentiment,
		translated_text=review.translated_text,
	)


def _list_response(key: Optional[str], reviews) -> ReviewListResponse:
	items = [_review_out(r) for r in reviews]
	return ReviewListResponse(key=key, count=len(items), results=items)


def _require_manager() -> ReviewsManager:
	if MANAGER is None:  # manager must be ready to serve
		logger.warning("[API] Request received but manager not initialized")
		raise HTTPException(status_code=503, detail="Review index is not ready")
	return MANAGER


# FastAPI startup hook to build the corpus and indices once
@app.on_event("startup")
async def startup_event():
	"""Load, enrich and index the corpus; abort startup if the corpus is unusable."""
	global MANAGER  # refer to module-level global
	logger.info("[API] Startup: loading reviews and building indices...")  # log intent
	try:
		MANAGER = get_manager()  # one-time initialization
	except CorpusError:
		logger.exception("[API] Review corpus could not be loaded; aborting startup")
		raise
	logger.info(f"[API] Startup complete in {MANAGER.startup_seconds:.2f}s.")  # summary log


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	ready = MANAGER is not None and MANAGER.initialized
	return {
		"status": "ok",  # constant indicator
		"engine_ready": ready,  # True if indices are built
		"startup_seconds": round(MANAGER.startup_seconds, 2) if ready else 0.0,  # startup latency
		"summary": MANAGER.summary() if ready else None,  # index counts
	}


@app.get("/reviews", response_model=ReviewListResponse)
async def list_reviews(language: Optional[str] = None, movie: Optional[str] = None):
	"""All reviews in corpus order, optionally restricted to one language and/or movie."""
	manager = _require_manager()
	reviews = manager.reviews
	if language is not None:
		reviews = [r for r in reviews if r.language == language]
	if movie is not None:
		reviews = [r for r in reviews if r.movie == movie]
	return _list_response(None, reviews)


@app.get("/reviews/{review_id}", response_model=ReviewOut)
async def get_review(review_id: int):
	manager = _require_manager()
	review = manager.get_review(review_id)
	if review is None:
		raise HTTPException(status_code=404, detail=f"Review {review_id} not found")
	return _review_out(review)


# Main search endpoint that accepts a free-text query
@app.get("/search", response_model=SearchResponse)
async def search(q: str = Query(..., min_length=1, description="Words the reviews must contain")):
	"""Return every review containing all tokens of the query (no ranking)."""
	manager = _require_manager()
	start = time.time()  # start timer
	logger.debug(f"[API] /search q='{q}'")  # debug log of input
	results = manager.search(q)  # membership lookup
	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] /search served {len(results)} results in {elapsed_ms:.2f} ms")  # summary
	items = [_review_out(r) for r in results]
	return SearchResponse(query=q, elapsed_ms=round(elapsed_ms, 2), count=len(items), results=items)


@app.get("/movies", response_model=List[KeyCount])
async def list_movies():
	manager = _require_manager()
	return [KeyCount(key=k, count=len(v)) for k, v in manager.by_movie.items()]


@app.get("/movies/{movie}/reviews", response_model=ReviewListResponse)
async def movie_reviews(movie: str):
	manager = _require_manager()
	reviews = manager.reviews_for_movie(movie)
	if not reviews:
		raise HTTPException(status_code=404, detail=f"No reviews for movie '{movie}'")
	return _list_response(movie, reviews)


@app.get("/actors", response_model=List[KeyCount])
async def list_actors():
	manager = _require_manager()
	return [KeyCount(key=k, count=len(v)) for k, v in manager.by_actor.items()]


@app.get("/actors/{name}/reviews", response_model=ReviewListResponse)
async def actor_reviews(name: str):
	"""Reviews mentioning an actor; the name is resolved fuzzily against indexed actors."""
	manager = _require_manager()
	actor = manager.find_actor(name)
	if actor is None:
		raise HTTPException(status_code=404, detail=f"No reviews for actor '{name}'")
	return _list_response(actor, manager.reviews_for_actor(actor))


@app.get("/languages", response_model=List[KeyCount])
async def list_languages():
	manager = _require_manager()
	return [KeyCount(key=k, count=len(v)) for k, v in manager.by_language.items()]


@app.get("/languages/{language}/reviews", response_model=ReviewListResponse)
async def language_reviews(language: str):
	manager = _require_manager()
	reviews = manager.reviews_for_language(language)
	if not reviews:
		raise HTTPException(status_code=404, detail=f"No reviews in language '{language}'")
	return _list_response(language, reviews)
