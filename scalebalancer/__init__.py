"""
Scale balancer.

Reads a hierarchy of balance scales, computes the counterweight each pan
needs and reports it.
"""

__version__ = "0.1.0"
