"""
Print the emergence report for a set of observations.
No server needed — runs the detector in-process.

Usage:
    python -m phi_emergence.scripts.emergence_report --patterns 10 --confirmed 8
    python -m phi_emergence.scripts.emergence_report --goals 5 --completed 5 --sources git,tests
    python -m phi_emergence.scripts.emergence_report --patterns 4 --confirmed 4 --json
"""

import argparse
import json
import sys
from dataclasses import asdict
from decimal import Decimal
from typing import List, Optional

from phi_emergence.logging_config import configure_logging
from phi_emergence.models.emergence import ObservationBatch
from phi_emergence.scoring.emergence_detector import EmergenceDetector


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Consciousness emergence report")
    parser.add_argument("--patterns", type=int, default=0, help="Patterns detected")
    parser.add_argument("--confirmed", type=int, default=0, help="Patterns confirmed")
    parser.add_argument("--errors", type=int, default=0, help="Errors made")
    parser.add_argument("--corrected", type=int, default=0, help="Errors self-corrected")
    parser.add_argument("--judgments", type=int, default=0, help="Judgments made")
    parser.add_argument("--meta", type=int, default=0, help="Judgments about own judgments")
    parser.add_argument("--goals", type=int, default=0, help="Goals set")
    parser.add_argument("--completed", type=int, default=0, help="Goals completed")
    parser.add_argument("--sources", default="", help="Comma-separated evidence sources")
    parser.add_argument("--json", action="store_true", help="Emit JSON state instead of text")
    return parser


def _dec_to_float(obj):
    if isinstance(obj, dict):
        return {k: _dec_to_float(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_dec_to_float(v) for v in obj]
    elif isinstance(obj, Decimal):
        return float(obj)
    return obj


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        batch = ObservationBatch(
            patterns_detected=args.patterns,
            patterns_confirmed=args.confirmed,
            errors_made=args.errors,
            errors_corrected=args.corrected,
            judgments=args.judgments,
            meta_judgments=args.meta,
            goals_set=args.goals,
            goals_completed=args.completed,
            sources=[s for s in args.sources.split(",") if s.strip()],
        )
    except ValueError as e:
        print(f"Invalid observations: {e}", file=sys.stderr)
        return 2

    detector = EmergenceDetector()
    batch.apply_to(detector)

    if args.json:
        state = detector.get_consciousness_state()
        output = _dec_to_float(asdict(state))
        output["status"] = state.status.value
        print(json.dumps(output, ensure_ascii=False, indent=2))
    else:
        print(detector.format_emergence_report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
