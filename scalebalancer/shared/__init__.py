"""
Shared utilities and models for the scale balancer.
"""

from scalebalancer.shared.config import Settings, get_settings, reload_settings
from scalebalancer.shared.exceptions import (
    ConfigurationError,
    CycleError,
    ScaleBalancerError,
    UnresolvedReferenceError,
)
from scalebalancer.shared.models import (
    LiteralSide,
    Pan,
    ParseIssue,
    ReferenceSide,
    Scale,
    ScaleRegistry,
    Side,
    Weighable,
)

__all__ = [
    "Settings",
    "get_settings",
    "reload_settings",
    "ConfigurationError",
    "CycleError",
    "ScaleBalancerError",
    "UnresolvedReferenceError",
    "LiteralSide",
    "Pan",
    "ParseIssue",
    "ReferenceSide",
    "Scale",
    "ScaleRegistry",
    "Side",
    "Weighable",
]
