"""
Main pipeline handler.
"""

import logging
from typing import Iterable, Optional, TextIO

from scalebalancer.balancing import ScaleBalancer
from scalebalancer.ingestion import ScaleParser
from scalebalancer.reporting import ScaleReporter
from scalebalancer.shared.config import Settings, get_settings
from scalebalancer.shared.models import ParseIssue, ScaleRegistry

logger = logging.getLogger(__name__)


class BalancingPipeline:
    """
    Runs the complete balancing pipeline.
    
    Steps:
    1. Parse: Build the scale registry from input lines
    2. Balance: Compute masses and counterweights
    3. Report: Write one record per scale
    
    Each step finishes before the next starts. A pipeline instance keeps the
    issues of its last run in ``issues``.
    """
    
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.issues: list[ParseIssue] = []
        
        self.balancer = ScaleBalancer(order=self.settings.balancing.order)
        self.reporter = ScaleReporter(format=self.settings.reporting.format)
    
    def parse(self, lines: Iterable[str]) -> ScaleRegistry:
        """Step 1: parse input lines into a fresh registry."""
        parser = ScaleParser(
            numeric_policy=self.settings.parsing.numeric_policy,
            comment_prefix=self.settings.parsing.comment_prefix,
            registry=ScaleRegistry(scale_self_mass=self.settings.balancing.scale_self_mass),
        )
        registry = parser.parse(lines)
        self.issues = parser.issues
        return registry
    
    def run(self, lines: Iterable[str], out: TextIO) -> ScaleRegistry:
        """
        Process input lines through the complete pipeline.
        
        Args:
            lines: Scale definition lines
            out: Stream receiving the report
            
        Returns:
            The balanced registry
        """
        logger.info("Step 1: Parsing scale definitions")
        registry = self.parse(lines)
        
        logger.info("Step 2: Balancing scales")
        self.balancer.balance(registry)
        
        logger.info("Step 3: Reporting counterweights")
        self.reporter.write(out, registry)
        
        return registry
