"""Main CLI entry point."""

import argparse
import logging
import sys
from typing import Optional

from scalebalancer import __version__
from scalebalancer.pipeline import BalancingPipeline
from scalebalancer.shared.config import get_settings
from scalebalancer.shared.exceptions import ScaleBalancerError
from scalebalancer.shared.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="scalebalancer",
        description="Compute the counterweights that balance a hierarchy of scales",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Scale definition file (default: stdin)",
    )
    parser.add_argument(
        "-o", "--output",
        default="-",
        help="Report file (default: stdout)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        help="Report format",
    )
    parser.add_argument(
        "--order",
        choices=["reverse", "topological"],
        help="Order in which scales are balanced",
    )
    parser.add_argument(
        "--numeric-policy",
        choices=["strict", "prefix"],
        help="How weights with trailing non-digits are handled",
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (default from config: WARNING)",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"scalebalancer {__version__}",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    
    try:
        settings = get_settings(args.config).model_copy(deep=True)
    except ScaleBalancerError as e:
        configure_logging()
        logger.error(str(e))
        return 1
    
    if args.format:
        settings.reporting.format = args.format
    if args.order:
        settings.balancing.order = args.order
    if args.numeric_policy:
        settings.parsing.numeric_policy = args.numeric_policy
    
    configure_logging(args.log_level or settings.logging.level, settings.logging.format)
    
    pipeline = BalancingPipeline(settings)
    
    try:
        if args.input == "-":
            infile = sys.stdin
            if hasattr(infile, "reconfigure"):
                infile.reconfigure(errors="surrogateescape")
        else:
            infile = open(args.input, encoding="utf-8", errors="surrogateescape")
        try:
            if args.output == "-":
                pipeline.run(infile, sys.stdout)
            else:
                with open(args.output, "w", encoding="utf-8") as outfile:
                    pipeline.run(infile, outfile)
        finally:
            if infile is not sys.stdin:
                infile.close()
    except (ScaleBalancerError, OSError) as e:
        logger.error(str(e))
        return 1
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
