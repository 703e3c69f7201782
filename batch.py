#!/usr/bin/env python3
"""
Batch runner — score many blog drafts and write a combined report.

Usage:
    python batch.py drafts/*.md
    python batch.py drafts/*.md --output-dir reports --min-score 70
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from analyze import analyze_file, setup_logging
from config import OUTPUT

logger = logging.getLogger(__name__)


def score_drafts(paths: list) -> list[dict]:
    results = []
    for i, path in enumerate(paths, 1):
        logger.info("[%d/%d] %s", i, len(paths), path)
        try:
            report = analyze_file(path)
        except (OSError, ValueError) as e:
            logger.warning("Skipping %s: %s", path, e)
            results.append({"path": str(path), "status": "error", "error": str(e)})
            continue
        results.append({
            "path": str(path), "status": "success",
            "overall_score": report.overall_score,
            "band": report.overall_band.name,
            "title_score": report.title_score,
            "meta_description_score": report.meta_description_score,
            "content_score": report.content_score,
            "ai_discoverability_percentage": report.ai_discoverability_percentage,
            "failing_checks": [c.id for c in report.checklist if not c.passed],
        })
    return results


def write_batch_report(results: list[dict], output_dir) -> Path:
    report_path = Path(output_dir) / f"batch_report_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(json.dumps(results, indent=OUTPUT["json_indent"]))
    return report_path


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Batch score blog drafts")
    parser.add_argument("paths", nargs="+", help="Draft files to score")
    parser.add_argument("--output-dir", default=OUTPUT["dir"], help=f"Report directory (default: {OUTPUT['dir']})")
    parser.add_argument("--min-score", type=int, default=None,
                        help="Exit with status 1 if any draft scores below this")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    print(f"\n{'='*70}")
    print(f"  BATCH SEO SCORING")
    print(f"  Drafts: {len(args.paths)}")
    print(f"{'='*70}\n")

    results = score_drafts(args.paths)

    success = [r for r in results if r["status"] == "success"]
    failed = [r for r in results if r["status"] == "error"]
    if success:
        avg_score = sum(r["overall_score"] for r in success) / len(success)
        print(f"  Scored:    {len(success)}/{len(results)}")
        print(f"  Avg score: {avg_score:.1f}/100\n")
        for r in sorted(success, key=lambda x: x["overall_score"], reverse=True):
            bar_len = int(r["overall_score"] / 2.5)
            bar = "█" * bar_len + "░" * (40 - bar_len)
            print(f"  {Path(r['path']).name:<30} {bar} {r['overall_score']} ({r['band']})")
    for r in failed:
        print(f"  ✗ {r['path']}: {r['error']}")

    report_path = write_batch_report(results, args.output_dir)
    print(f"\n  Report: {report_path}")
    print(f"{'='*70}\n")

    if args.min_score is not None:
        below = [r for r in success if r["overall_score"] < args.min_score]
        if below:
            print(f"  {len(below)} draft(s) below minimum score {args.min_score}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
