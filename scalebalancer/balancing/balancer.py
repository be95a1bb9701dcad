"""
Counterweight calculation for a registry of scales.
"""

import logging
from typing import Iterable

from scalebalancer.shared.exceptions import CycleError, UnresolvedReferenceError
from scalebalancer.shared.models import Scale, ScaleRegistry

logger = logging.getLogger(__name__)

BALANCE_ORDERS = ("reverse", "topological")

_VISITING = "visiting"
_DONE = "done"


def reverse_order(registry: ScaleRegistry) -> list[Scale]:
    """Scales in reverse first-appearance order."""
    return list(reversed(registry.scales))


def topological_order(registry: ScaleRegistry) -> list[Scale]:
    """
    Scales ordered so that every referenced scale precedes its referrers.
    
    Raises:
        CycleError: if scales reference each other in a loop
        UnresolvedReferenceError: if a side names an unknown scale
    """
    order: list[Scale] = []
    state: dict[str, str] = {}
    
    for root in registry:
        if root.name in state:
            continue
        
        state[root.name] = _VISITING
        path = [root.name]
        stack = [(root, iter(root.referenced_names()))]
        
        while stack:
            scale, children = stack[-1]
            for child_name in children:
                child_state = state.get(child_name)
                if child_state == _DONE:
                    continue
                if child_state == _VISITING:
                    raise CycleError(path[path.index(child_name):] + [child_name])
                
                child = registry.get(child_name)
                if child is None:
                    raise UnresolvedReferenceError(child_name)
                
                state[child_name] = _VISITING
                path.append(child_name)
                stack.append((child, iter(child.referenced_names())))
                break
            else:
                stack.pop()
                path.pop()
                state[scale.name] = _DONE
                order.append(scale)
    
    return order


class ScaleBalancer:
    """
    Computes the counterweight each scale side needs.
    
    Counterweights are assigned to the lighter side only, never added to,
    so balancing the same registry twice gives the same result.
    """
    
    def __init__(self, order: str = "reverse"):
        if order not in BALANCE_ORDERS:
            raise ValueError(f"Unknown balance order: {order}")
        self.order = order
    
    def balance(self, registry: ScaleRegistry) -> ScaleRegistry:
        """
        Balance every scale in the registry in place.
        
        Args:
            registry: Scales to balance
            
        Returns:
            The same registry, masses and counterweights filled in
        """
        if self.order == "topological":
            scales: Iterable[Scale] = topological_order(registry)
        else:
            scales = reverse_order(registry)
        
        heaviest = None
        for scale in scales:
            self.balance_scale(registry, scale)
            if heaviest is None or scale.mass > heaviest.mass:
                heaviest = scale
        
        if heaviest is not None:
            logger.info(
                f"Balanced {len(registry)} scale(s) in {self.order} order, "
                f"heaviest: {heaviest.name} ({heaviest.mass})"
            )
        return registry
    
    def balance_scale(self, registry: ScaleRegistry, scale: Scale) -> None:
        """Balance one scale whose sides are already final."""
        left = registry.resolve(scale.left)
        right = registry.resolve(scale.right)
        
        # Only the lighter side is written; a shared scale keeps what an
        # earlier parent gave it when it is the heavier side here.
        if left.mass > right.mass:
            right.balance_mass = left.mass - right.mass
        elif right.mass > left.mass:
            left.balance_mass = right.mass - left.mass
        
        scale.pan.mass = (
            scale.self_mass
            + left.mass
            + right.mass
            + left.balance_mass
            + right.balance_mass
        )
        
        logger.debug(
            f"Scale {scale.name}: left {left.mass}+{left.balance_mass}, "
            f"right {right.mass}+{right.balance_mass}, total {scale.mass}"
        )


def balance_each_scale(registry: ScaleRegistry, order: str = "reverse") -> ScaleRegistry:
    """Balance a registry with a default balancer."""
    return ScaleBalancer(order=order).balance(registry)
