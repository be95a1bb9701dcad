"""
Balancing module - computes counterweights.
"""

from scalebalancer.balancing.balancer import (
    ScaleBalancer,
    balance_each_scale,
    reverse_order,
    topological_order,
)

__all__ = ["ScaleBalancer", "balance_each_scale", "reverse_order", "topological_order"]
