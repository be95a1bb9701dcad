"""
Random scale trees for sample files and tests.

Expected results are computed recursively, independent of the balancer.
"""

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class SampleScale:
    """A scale in a generated tree."""
    name: str
    left_mass: int = 0
    right_mass: int = 0
    left_child: Optional["SampleScale"] = None
    right_child: Optional["SampleScale"] = None
    adjust_left: int = 0
    adjust_right: int = 0
    total_mass: int = 1


@dataclass
class SampleCase:
    """Input lines and the report they should produce."""
    input_lines: list[str] = field(default_factory=list)
    expected_lines: list[str] = field(default_factory=list)


def generate_tree(num_scales: int, rng: Optional[random.Random] = None) -> list[SampleScale]:
    """
    Generate a random scale tree, parents listed before their children.
    
    Args:
        num_scales: Number of scales, at least 1
        rng: Random source (default: fresh unseeded)
        
    Returns:
        Scales in listing order; the first one is the root
    """
    if num_scales < 1:
        raise ValueError("Number of scales must be at least 1")
    
    rng = rng or random.Random()
    scales = [SampleScale(name=f"S{i + 1}") for i in range(num_scales)]
    
    for i, child in enumerate(scales[1:], start=1):
        # Hang each scale from an earlier one that still has a free side
        candidates = [s for s in scales[:i] if s.left_child is None or s.right_child is None]
        parent = rng.choice(candidates)
        if parent.left_child is None and (parent.right_child is not None or rng.random() < 0.5):
            parent.left_child = child
        else:
            parent.right_child = child
    
    for scale in scales:
        if scale.left_child is None:
            scale.left_mass = rng.randint(0, 10)
        if scale.right_child is None:
            scale.right_mass = rng.randint(0, 10)
    
    return scales


def calculate_balance(scale: Optional[SampleScale], self_mass: int = 1) -> int:
    """Fill in adjustments for a subtree and return its total mass."""
    if scale is None:
        return 0
    
    left_total = scale.left_mass + calculate_balance(scale.left_child, self_mass)
    right_total = scale.right_mass + calculate_balance(scale.right_child, self_mass)
    
    scale.adjust_left = max(0, right_total - left_total)
    scale.adjust_right = max(0, left_total - right_total)
    scale.total_mass = self_mass + left_total + right_total + scale.adjust_left + scale.adjust_right
    
    return scale.total_mass


def generate_case(num_scales: int, rng: Optional[random.Random] = None) -> SampleCase:
    """Generate input records and the expected report for a random tree."""
    scales = generate_tree(num_scales, rng)
    calculate_balance(scales[0])
    
    case = SampleCase()
    for scale in scales:
        left = scale.left_child.name if scale.left_child else str(scale.left_mass)
        right = scale.right_child.name if scale.right_child else str(scale.right_mass)
        case.input_lines.append(f"{scale.name},{left},{right}")
        case.expected_lines.append(f"{scale.name},{scale.adjust_left},{scale.adjust_right}")
    
    return case


def write_case(case: SampleCase, output_dir: Path, base_name: str) -> tuple[Path, Path]:
    """Write ``<base>_input.txt`` and ``<base>_expected.txt``."""
    output_dir.mkdir(parents=True, exist_ok=True)
    input_path = output_dir / f"{base_name}_input.txt"
    expected_path = output_dir / f"{base_name}_expected.txt"
    
    input_path.write_text("\n".join(case.input_lines) + "\n")
    expected_path.write_text("\n".join(case.expected_lines) + "\n")
    
    return input_path, expected_path
