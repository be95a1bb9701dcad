"""
Parse scale definitions into a registry.

Each record is a line ``name,left,right``. A side token starting with a
digit is a literal weight; any other non-empty token names another scale.
"""

import logging
import re
from typing import Iterable, Optional

from scalebalancer.shared.models import (
    LiteralSide,
    Pan,
    ParseIssue,
    ReferenceSide,
    Scale,
    ScaleRegistry,
)

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_DIGITS = re.compile(r"[0-9]+")
# Bytes that could not be decoded, as left by errors="surrogateescape"
_UNDECODABLE = re.compile("[\udc80-\udcff]")

NUMERIC_POLICIES = ("strict", "prefix")


def is_literal(token: str) -> bool:
    """True if the token is a weight rather than a scale name."""
    return bool(token) and "0" <= token[0] <= "9"


def split_line(line: str) -> tuple[str, str, str]:
    """
    Split a record into name, left and right tokens.
    
    All whitespace is removed from every token, not just the ends.
    Missing tokens come back empty; tokens past the third are ignored.
    """
    tokens = [_WHITESPACE.sub("", token) for token in line.split(",")]
    tokens += [""] * (3 - len(tokens))
    return tokens[0], tokens[1], tokens[2]


class ScaleParser:
    """
    Build a :class:`ScaleRegistry` from line-oriented scale records.
    
    Rejected lines are logged and collected in ``issues``; parsing always
    continues with the next line.
    """
    
    def __init__(
        self,
        numeric_policy: str = "strict",
        comment_prefix: str = "#",
        registry: Optional[ScaleRegistry] = None,
    ):
        if numeric_policy not in NUMERIC_POLICIES:
            raise ValueError(f"Unknown numeric policy: {numeric_policy}")
        if not comment_prefix:
            raise ValueError("Comment prefix must not be empty")
        
        self.numeric_policy = numeric_policy
        self.comment_prefix = comment_prefix
        self.registry = registry if registry is not None else ScaleRegistry()
        self.issues: list[ParseIssue] = []
    
    def parse(self, lines: Iterable[str]) -> ScaleRegistry:
        """
        Parse every line in input order.
        
        Args:
            lines: Any iterable of text lines (file object, list, StringIO)
            
        Returns:
            The registry, scales in first-appearance order
        """
        for line_number, raw_line in enumerate(lines):
            self.parse_line(raw_line, line_number)
        
        logger.info(
            f"Parsed {len(self.registry)} scale(s), rejected {len(self.issues)} line(s)"
        )
        return self.registry
    
    def parse_line(self, raw_line: str, line_number: int = 0) -> Optional[Scale]:
        """
        Parse a single record.
        
        Returns:
            The defined scale, or None for skipped and rejected lines
        """
        line = raw_line.rstrip("\r\n")
        if not line or line.startswith(self.comment_prefix):
            return None
        
        if _UNDECODABLE.search(line):
            return self._reject(line_number, line, "undecodable bytes")
        
        name, left, right = split_line(line)
        
        if not name:
            return self._reject(line_number, line, "missing scale name")
        if left == name or right == name:
            return self._reject(line_number, line, "scale references itself")
        
        left_weight = self._weight(left)
        right_weight = self._weight(right)
        if (is_literal(left) and left_weight is None) or (
            is_literal(right) and right_weight is None
        ):
            return self._reject(line_number, line, "non-numeric weight")
        
        scale = self.registry.get_or_create(name)
        self._assign(scale, "left", left, left_weight)
        self._assign(scale, "right", right, right_weight)
        
        logger.debug(f"Line {line_number}: defined scale {name} ({left}, {right})")
        return scale
    
    def _weight(self, token: str) -> Optional[int]:
        """Numeric value of a literal token, None if it is not one."""
        if not is_literal(token):
            return None
        
        if self.numeric_policy == "prefix":
            return int(_DIGITS.match(token).group())
        
        if _DIGITS.fullmatch(token):
            return int(token)
        return None
    
    def _assign(self, scale: Scale, attr: str, token: str, weight: Optional[int]):
        """Set one side of a scale from its token; empty tokens leave it alone."""
        if weight is not None:
            setattr(scale, attr, LiteralSide(pan=Pan(mass=weight)))
        elif token:
            self.registry.get_or_create(token)
            setattr(scale, attr, ReferenceSide(name=token))
    
    def _reject(self, line_number: int, line: str, reason: str) -> None:
        printable = line.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")
        issue = ParseIssue(line_number=line_number, line=printable, reason=reason)
        self.issues.append(issue)
        logger.warning(f"{issue} ({reason})")
        return None


def parse_scales(
    lines: Iterable[str],
    numeric_policy: str = "strict",
    scale_self_mass: int = Scale.DEFAULT_MASS,
) -> ScaleRegistry:
    """Parse lines into a fresh registry."""
    parser = ScaleParser(
        numeric_policy=numeric_policy,
        registry=ScaleRegistry(scale_self_mass=scale_self_mass),
    )
    return parser.parse(lines)
