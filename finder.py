#!/usr/bin/env python3
"""Find catalog voices matching a free-text description.

    python finder.py "young British male with a confident tone"
    python finder.py "latina narrator" --catalog voices.json --top 3
"""

import argparse
import json
import logging
import sys

from dotenv import load_dotenv
load_dotenv()

from config import GOOD_MATCH_THRESHOLD, LOG_LEVEL, MAX_RESULTS
from extraction.design import normalize_voice_description
from extraction.extractor import extract_voice_attributes
from matching.ranking import rank_voices
from matching.scoring import score_breakdown
from models import load_catalog

logger = logging.getLogger(__name__)


def _print_attributes(description: str, attrs, as_json: bool) -> None:
    design = normalize_voice_description(attrs, description)
    if as_json:
        print(json.dumps({
            "attributes": attrs.to_dict(),
            "design": design.model_dump(exclude_none=True),
        }, ensure_ascii=False, indent=2))
        return
    print(f"Parsed: {attrs.to_dict() or '(nothing recognized)'}")
    print(f"Design: {design.to_design_prompt()}")


def _print_matches(matches, as_json: bool) -> None:
    if as_json:
        print(json.dumps([
            {"voice": m.voice.to_dict(), "score": m.score}
            for m in matches
        ], ensure_ascii=False, indent=2))
        return
    if not matches:
        print("No good matches.")
        return
    for rank, m in enumerate(matches, 1):
        b = score_breakdown(m.voice, m.attributes)
        label = m.voice.name or m.voice.id
        print(
            f"{rank}. {label} [{m.voice.accent or '-'} / {m.voice.gender or '-'} / "
            f"{m.voice.age_group or '-'}] score={m.score} "
            f"(lang {b.language}, gender {b.gender}, accent {b.accent}, "
            f"age {b.age}, bonus {b.bonus})"
        )


def main():
    parser = argparse.ArgumentParser(description="Match voice descriptions to a catalog")
    parser.add_argument("description", help="Free-text voice description")
    parser.add_argument(
        "--catalog", type=str, help="JSON file with a list of voices (or {'voices': [...]})"
    )
    parser.add_argument(
        "--top", type=int, default=MAX_RESULTS, help="Maximum number of matches to show"
    )
    parser.add_argument(
        "--threshold", type=int, default=GOOD_MATCH_THRESHOLD,
        help="Only show voices scoring above this",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("--verbose", action="store_true", help="Log extraction decisions")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    catalog = []
    if args.catalog:
        try:
            catalog = load_catalog(args.catalog)
        except (OSError, ValueError) as e:
            logger.error(f"Could not load catalog {args.catalog}: {e}")
            sys.exit(1)
        logger.info(f"Loaded {len(catalog)} voices from {args.catalog}")

    attrs = extract_voice_attributes(args.description, catalog)
    _print_attributes(args.description, attrs, args.json)

    if catalog:
        matches = rank_voices(args.description, catalog, max_results=args.top, threshold=args.threshold)
        _print_matches(matches, args.json)


if __name__ == "__main__":
    main()
