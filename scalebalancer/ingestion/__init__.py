"""
Ingestion module for scale definitions.
"""

from scalebalancer.ingestion.parser import ScaleParser, is_literal, parse_scales, split_line

__all__ = ["ScaleParser", "is_literal", "parse_scales", "split_line"]
