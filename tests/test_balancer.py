"""Tests for counterweight calculation."""

import pytest

from scalebalancer.balancing.balancer import (
    ScaleBalancer,
    balance_each_scale,
    reverse_order,
    topological_order,
)
from scalebalancer.ingestion.parser import parse_scales
from scalebalancer.shared.exceptions import CycleError
from scalebalancer.shared.models import LiteralSide, Pan, ReferenceSide, Scale, ScaleRegistry


def _literal_scale(registry: ScaleRegistry, name: str, left: int, right: int) -> Scale:
    scale = registry.get_or_create(name)
    scale.left = LiteralSide(pan=Pan(mass=left))
    scale.right = LiteralSide(pan=Pan(mass=right))
    return scale


def test_heavier_left_puts_counterweight_right():
    """Test the lighter side receives the difference."""
    registry = ScaleRegistry()
    scale = _literal_scale(registry, "A", 4, 2)
    
    balance_each_scale(registry)
    
    assert scale.left.pan.balance_mass == 0
    assert scale.right.pan.balance_mass == 2
    # 4 + 2 + 2 + scale hardware
    assert scale.mass == 8 + Scale.DEFAULT_MASS


def test_heavier_right_puts_counterweight_left():
    """Test a large imbalance on the right."""
    registry = ScaleRegistry()
    scale = _literal_scale(registry, "HeavyRight", 1, 1000)
    
    balance_each_scale(registry)
    
    assert scale.left.pan.balance_mass == 999
    assert scale.right.pan.balance_mass == 0
    assert scale.mass == 1001 + 1 + 999


def test_equal_sides_need_nothing():
    """Test an already balanced scale."""
    registry = ScaleRegistry()
    scale = _literal_scale(registry, "S", 5, 5)
    
    balance_each_scale(registry)
    
    assert scale.left.pan.balance_mass == 0
    assert scale.right.pan.balance_mass == 0
    assert scale.mass == 11


@pytest.mark.parametrize("left,right", [(0, 0), (3, 9), (9, 3), (7, 7), (0, 12)])
def test_difference_and_symmetry(left, right):
    """Test only the lighter side is topped up, by exactly the difference."""
    registry = ScaleRegistry()
    scale = _literal_scale(registry, "S", left, right)
    
    balance_each_scale(registry)
    
    left_pan, right_pan = scale.left.pan, scale.right.pan
    assert left_pan.total_mass == right_pan.total_mass == max(left, right)
    assert min(left_pan.balance_mass, right_pan.balance_mass) == 0
    assert max(left_pan.balance_mass, right_pan.balance_mass) == abs(left - right)


def test_nested_scale_uses_child_total_mass():
    """Test a referenced scale weighs its contents plus counterweights plus itself."""
    registry = parse_scales(["Top,Mid,1", "Mid,2,3"])
    balance_each_scale(registry)
    
    mid = registry.get("Mid")
    top = registry.get("Top")
    assert mid.left.pan.balance_mass == 1
    assert mid.right.pan.balance_mass == 0
    assert mid.mass == 6 + Scale.DEFAULT_MASS
    assert top.right.pan.balance_mass == 6
    assert mid.balance_mass == 0


def test_balancing_twice_is_idempotent():
    """Test a second pass leaves masses and counterweights unchanged."""
    registry = parse_scales(["A,B,1", "B,C,2", "C,3,4"])
    balancer = ScaleBalancer()
    
    balancer.balance(registry)
    first = [(s.mass, registry.resolve(s.left).balance_mass, registry.resolve(s.right).balance_mass) for s in registry]
    balancer.balance(registry)
    second = [(s.mass, registry.resolve(s.left).balance_mass, registry.resolve(s.right).balance_mass) for s in registry]
    
    assert first == second


def test_custom_self_mass():
    """Test the hardware weight is configurable per registry."""
    registry = parse_scales(["A,B,0", "B,1,1"], scale_self_mass=10)
    balance_each_scale(registry)
    
    assert registry.get("B").mass == 12
    assert registry.get("A").right.pan.balance_mass == 12


def test_reverse_order():
    """Test the default order is reverse first appearance."""
    registry = parse_scales(["A,B,1", "B,C,2", "C,3,4"])
    
    assert [s.name for s in reverse_order(registry)] == ["C", "B", "A"]


def test_topological_order_puts_children_first():
    """Test references are evaluated before their referrers regardless of listing order."""
    registry = ScaleRegistry()
    child = _literal_scale(registry, "Child", 1, 2)
    parent = registry.get_or_create("Parent")
    parent.left = ReferenceSide(name="Child")
    parent.right = LiteralSide(pan=Pan(mass=1))
    
    assert [s.name for s in topological_order(registry)] == ["Child", "Parent"]
    
    balance_each_scale(registry, order="topological")
    
    assert child.mass == 5
    assert parent.right.pan.balance_mass == 4


def test_reverse_order_is_stale_for_out_of_order_registry():
    """Test the reverse pass reads a not yet balanced child when listed backwards."""
    registry = ScaleRegistry()
    _literal_scale(registry, "Child", 1, 2)
    parent = registry.get_or_create("Parent")
    parent.left = ReferenceSide(name="Child")
    parent.right = LiteralSide(pan=Pan(mass=1))
    
    balance_each_scale(registry, order="reverse")
    
    # Parent saw Child at its unbalanced self mass of 1.
    assert parent.right.pan.balance_mass == 0
    assert parent.mass == 3
    assert registry.get("Child").mass == 5


def test_topological_order_detects_cycle():
    """Test a reference loop is reported instead of silently misbalanced."""
    registry = ScaleRegistry()
    a = registry.get_or_create("A")
    b = registry.get_or_create("B")
    a.left = ReferenceSide(name="B")
    b.right = ReferenceSide(name="A")
    
    with pytest.raises(CycleError) as exc_info:
        balance_each_scale(registry, order="topological")
    
    assert exc_info.value.cycle == ["A", "B", "A"]


def test_reverse_order_tolerates_cycle():
    """Test the reverse pass never raises on a reference loop."""
    registry = ScaleRegistry()
    a = registry.get_or_create("A")
    b = registry.get_or_create("B")
    a.left = ReferenceSide(name="B")
    b.right = ReferenceSide(name="A")
    
    balance_each_scale(registry)
    
    assert b.mass > 0
    assert a.mass > 0


def test_unknown_order():
    """Test an unknown order is refused."""
    with pytest.raises(ValueError):
        ScaleBalancer(order="random")


def test_shared_child_keeps_counterweight_when_heavier():
    """Test a scale under two parents keeps the counterweight from the parent where it is lighter."""
    registry = ScaleRegistry()
    shared = _literal_scale(registry, "X", 5, 5)
    light_parent = registry.get_or_create("A")
    light_parent.left = ReferenceSide(name="X")
    light_parent.right = LiteralSide(pan=Pan(mass=1))
    heavy_parent = registry.get_or_create("B")
    heavy_parent.left = ReferenceSide(name="X")
    heavy_parent.right = LiteralSide(pan=Pan(mass=50))
    
    # X first, then B (X lighter, gets 39), then A (X heavier, untouched)
    for scale in (shared, heavy_parent, light_parent):
        ScaleBalancer().balance_scale(registry, scale)
    
    assert shared.balance_mass == 39
    assert light_parent.right.pan.balance_mass == 10
    assert light_parent.mass == 1 + 11 + 1 + 39 + 10


def test_equal_sides_leave_existing_counterweight():
    """Test an equal comparison writes nothing to either side."""
    registry = ScaleRegistry()
    scale = _literal_scale(registry, "S", 4, 4)
    scale.left.pan.balance_mass = 3
    
    ScaleBalancer().balance_scale(registry, scale)
    
    assert scale.left.pan.balance_mass == 3
    assert scale.right.pan.balance_mass == 0
