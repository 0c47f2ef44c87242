"""
Enrich and index the review corpus once, then report what was built.

This script:
1) Loads reviews (bundled corpus or --corpus PATH)
2) Detects language, extracts person names, tokenizes, scores sentiment, translates
3) Builds the movie / actor / language / search-term indices
4) Prints a summary and optionally dumps the enriched reviews as JSON

Usage:
    python -m scripts.enrich_corpus
    python -m scripts.enrich_corpus --corpus data/reviews.json --dump output/enriched.json
"""

import argparse  # command-line options
import json  # enriched review dump
import sys  # exit codes and log sink
from pathlib import Path  # filesystem-safe paths

from loguru import logger  # console logging

from review_engine import settings  # defaults
from review_engine.errors import CorpusError  # fatal corpus errors
from review_engine.manager import ReviewsManager  # enrichment + indices facade
from review_engine.review_store import ReviewStore  # corpus loader


def setup_logging(log_level: str):
	"""Replace loguru's default sink with one at the requested level."""
	logger.remove()
	logger.add(sys.stderr, level=log_level.upper())


def parse_args(argv=None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Enrich and index a movie review corpus")
	parser.add_argument(
		"--corpus",
		default=settings.REVIEW_CORPUS_PATH,
		help="Path to a reviews JSON file (default: bundled corpus)",
	)
	parser.add_argument(
		"--dump",
		help="Write enriched reviews to this JSON file",
	)
	parser.add_argument(
		"--log-level",
		default=settings.LOG_LEVEL,
		choices=["DEBUG", "INFO", "WARNING", "ERROR"],
		help=f"Logging level (default: {settings.LOG_LEVEL})",
	)
	return parser.parse_args(argv)


def main(argv=None) -> int:
	args = parse_args(argv)
	setup_logging(args.log_level)

	# Headline banner for visibility in console
	logger.info("=" * 60)
	logger.info("Enrich Review Corpus")
	logger.info("=" * 60)

	manager = ReviewsManager(store=ReviewStore(args.corpus))
	try:
		manager.initialize()  # load -> enrich -> index
	except CorpusError as e:
		logger.exception(f"Review corpus could not be loaded: {e}")
		return 1

	summary = manager.summary()
	logger.info(f"[OK] Enriched {summary['reviews']} reviews in {manager.startup_seconds:.2f}s")
	logger.info(f"  Movies        : {summary['movies']}")
	logger.info(f"  Actors        : {summary['actors']}")
	logger.info(f"  Languages     : {summary['languages']}")
	logger.info(f"  Search terms  : {summary['search_terms']}")
	logger.info(f"  With sentiment: {summary['with_sentiment']}")
	logger.info(f"  Translated    : {summary['translated']}")

	if args.dump:
		dump_path = Path(args.dump)
		dump_path.parent.mkdir(parents=True, exist_ok=True)  # ensure exists
		payload = {'reviews': [r.to_dict() for r in manager.reviews]}
		dump_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding='utf-8')
		logger.info(f"[OK] Wrote enriched reviews to {dump_path}")

	logger.info("=" * 60)
	return 0


if __name__ == '__main__':
	sys.exit(main())
