#!/usr/bin/env python3
"""
Blog Draft SEO Scorer — score a single draft file

Usage:
    python analyze.py drafts/how-to-start-a-podcast.md
    python analyze.py drafts/post.json --json --output output/post_score.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from config import OUTPUT
from draft import load_draft
from scoring import ScoreReport, compute_score_report

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def analyze_file(path) -> ScoreReport:
    draft = load_draft(path)
    logger.info("Scoring %s (keyword: %r)", path, draft.primary_keyword)
    return compute_score_report(draft)


def write_report(report: ScoreReport, output: Path) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(report.to_dict(), indent=OUTPUT["json_indent"]))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Score a blog draft for on-page SEO")
    parser.add_argument("path", help="Draft file: markdown with YAML frontmatter, or a .json record")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON instead of a summary")
    parser.add_argument("--output", help="Also write the JSON report to this file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    path = Path(args.path)
    if not path.is_file():
        print(f"Error: draft not found: {path}")
        return 1

    try:
        report = analyze_file(path)
    except (OSError, ValueError) as e:
        print(f"Error: could not read {path}: {e}")
        return 1

    if args.json:
        print(json.dumps(report.to_dict(), indent=OUTPUT["json_indent"]))
    else:
        print(f"\n{report.summary()}\n")
        print(f"  AI Discoverability: {report.ai_discoverability_percentage}% ({report.ai_discoverability_score}/4). {report.ai_feedback}\n")

    if args.output:
        write_report(report, Path(args.output))
        if not args.json:
            print(f"  Report: {args.output}\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
