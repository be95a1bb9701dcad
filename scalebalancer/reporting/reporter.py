"""
Serialize balancing results.
"""

import json
import logging
from typing import TextIO

from scalebalancer.shared.models import Scale, ScaleRegistry

logger = logging.getLogger(__name__)

REPORT_FORMATS = ("text", "json")


class ScaleReporter:
    """Render each scale's counterweights in registry order. Read-only."""
    
    def __init__(self, format: str = "text"):
        if format not in REPORT_FORMATS:
            raise ValueError(f"Unknown report format: {format}")
        self.format = format
    
    def render(self, registry: ScaleRegistry) -> str:
        """Render the whole report as a string."""
        if self.format == "json":
            return json.dumps(self.to_records(registry), indent=2) + "\n"
        return "".join(self.format_line(registry, scale) for scale in registry)
    
    def write(self, out: TextIO, registry: ScaleRegistry) -> None:
        """Write the report to a text stream."""
        out.write(self.render(registry))
        logger.info(f"Reported {len(registry)} scale(s) as {self.format}")
    
    @staticmethod
    def format_line(registry: ScaleRegistry, scale: Scale) -> str:
        """One ``name,left,right`` record."""
        left = registry.resolve(scale.left)
        right = registry.resolve(scale.right)
        return f"{scale.name},{left.balance_mass},{right.balance_mass}\n"
    
    @staticmethod
    def to_records(registry: ScaleRegistry) -> list[dict]:
        """Report rows as dictionaries, for JSON output."""
        records = []
        for scale in registry:
            records.append({
                "name": scale.name,
                "left": registry.resolve(scale.left).balance_mass,
                "right": registry.resolve(scale.right).balance_mass,
                "mass": scale.mass,
            })
        return records


def report_changes(out: TextIO, registry: ScaleRegistry) -> None:
    """Write the text report to a stream."""
    ScaleReporter().write(out, registry)
