"""
ECA Advisor - Command Line Interface
====================================

Demonstration front-end: opens a file, recommends algorithms for it and
prints the result.
"""

import argparse
import json
import sys
import uuid
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

import yaml

from eca_advisor.advisor import EcaAdvisor
from eca_advisor.config import Config, Tradeoff
from eca_advisor.recommendation import Recommendation
from eca_advisor.utils.exceptions import AdvisorError
from eca_advisor.utils.logging_config import (
    Timer,
    get_logger,
    set_correlation_id,
    setup_logging,
)

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="eca-advisor",
        description="ECA Advisor - encryption and compression recommendations"
    )
    parser.add_argument(
        'file',
        type=Path,
        help='File to analyse'
    )
    parser.add_argument(
        '--last-used-hours', '-l',
        type=float,
        default=0.0,
        help='Hours since the file was last used (default: 0)'
    )
    parser.add_argument(
        '--attention', '-a',
        type=float,
        default=0.0,
        help='Predicted access likelihood between 0 and 1 (default: 0)'
    )
    parser.add_argument(
        '--size', '-s',
        type=int,
        default=None,
        help='Known file size in bytes (default: read from the file)'
    )
    parser.add_argument(
        '--tradeoff', '-t',
        choices=[t.value for t in Tradeoff],
        default=None,
        help='Selection preference (default: from config, else balanced)'
    )
    parser.add_argument(
        '--hardware-aes',
        action='store_true',
        default=None,
        help='Assume hardware AES acceleration'
    )
    parser.add_argument(
        '--force-extension-priority',
        action='store_true',
        default=None,
        help='Accepted for compatibility; extensions already override sniffed content'
    )
    parser.add_argument(
        '--config', '-c',
        type=Path,
        default=None,
        help='Path to YAML configuration (default: ./config.yaml)'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the recommendation as JSON'
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Override the configured log level'
    )
    return parser


def format_recommendation(path: Path, rec: Recommendation) -> str:
    """Render a recommendation for the terminal."""
    lines = [
        f"\n🔐 Recommendation for {path.name}:\n",
        f"  Detected:    {rec.detected_mime} ({rec.detected_category.value})",
        f"  Encryption:  {rec.encryption.value}",
    ]
    if rec.skip_compression:
        lines.append("  Compression: none (skipped)")
    elif rec.zstd_level is not None:
        lines.append(f"  Compression: {rec.compression.value} (level {rec.zstd_level})")
    else:
        lines.append(f"  Compression: {rec.compression.value}")
    lines.append(f"  Reason:      {rec.reason}")
    lines.append("\n  Scores:")
    for key, score in rec.score_breakdown.items():
        lines.append(f"    {key:24} {score:6.2f}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with CLI support."""
    args = build_parser().parse_args(argv)

    try:
        config = Config.load(args.config)
    except (AdvisorError, yaml.YAMLError) as e:
        print(f"✗ Invalid configuration: {e}", file=sys.stderr)
        return 1

    logging_config = config.logging
    if args.log_level:
        logging_config = replace(logging_config, level=args.log_level)
    setup_logging(logging_config)
    set_correlation_id(str(uuid.uuid4())[:8])

    prefs = config.preferences
    overrides = {}
    if args.tradeoff is not None:
        overrides["tradeoff"] = Tradeoff.parse(args.tradeoff)
    if args.hardware_aes is not None:
        overrides["assume_hardware_aes"] = True
    if args.force_extension_priority is not None:
        overrides["force_extension_priority"] = True
    if overrides:
        prefs = replace(prefs, **overrides)

    advisor = EcaAdvisor()
    try:
        with open(args.file, 'rb') as f, Timer(logger, "recommend"):
            rec = advisor.recommend(
                f,
                size_bytes=args.size,
                last_used_hours=args.last_used_hours,
                attention=args.attention,
                prefs=prefs,
            )
    except OSError as e:
        print(f"✗ Cannot open {args.file}: {e}", file=sys.stderr)
        return 1
    except AdvisorError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(rec.to_dict(), indent=2))
    else:
        print(format_recommendation(args.file, rec))
    return 0


if __name__ == "__main__":
    sys.exit(main())
