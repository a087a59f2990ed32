"""CLI job to build a competitor report for one hotel and print it as JSON."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from hotel_intel.core.config import get_settings
from hotel_intel.core.errors import NotFound, ValidationError
from hotel_intel.jobs.pipeline import build_orchestrator

logger = logging.getLogger(__name__)


def run_analysis(*, hotel_name: str, extended: bool) -> dict:
    settings = get_settings()
    if not settings.places_api_key:
        raise RuntimeError("PLACES_API_KEY is required")

    orchestrator = build_orchestrator(settings)
    report = orchestrator.extended_report(hotel_name) if extended else orchestrator.basic_report(hotel_name)
    return report.to_dict()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare a hotel against nearby competitors")
    parser.add_argument("hotel_name", help="Hotel name to resolve, e.g. 'Grand Plaza Singapore'")
    parser.add_argument(
        "--extended",
        action="store_true",
        help="Include nearby amenities and their analysis",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation for the printed report")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    args = build_parser().parse_args(argv)

    try:
        payload = run_analysis(hotel_name=args.hotel_name, extended=args.extended)
    except (ValidationError, NotFound) as exc:
        logger.error("%s", exc)
        return 2
    except Exception as exc:  # noqa: BLE001
        logger.error("Analysis failed: %s", exc, exc_info=True)
        return 1

    json.dump(payload, sys.stdout, indent=args.indent, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
