"""
Reporting module - serializes balancing results.
"""

from scalebalancer.reporting.reporter import ScaleReporter, report_changes

__all__ = ["ScaleReporter", "report_changes"]
