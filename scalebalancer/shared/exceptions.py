"""
Exception hierarchy for the scale balancer.

Malformed input lines are never raised; they are reported and skipped by
the parser. These exceptions cover the conditions that abort a run.
"""


class ScaleBalancerError(Exception):
    """Base class for all scale balancer errors."""


class ConfigurationError(ScaleBalancerError):
    """Settings could not be loaded or are invalid."""


class UnresolvedReferenceError(ScaleBalancerError):
    """A side refers to a scale that is not in the registry."""
    
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown scale referenced: {name}")


class CycleError(ScaleBalancerError):
    """Scales reference each other in a loop."""
    
    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        super().__init__(f"Reference cycle between scales: {' -> '.join(cycle)}")
