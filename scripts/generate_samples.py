"""Generate random scale definition files with their expected reports."""

import argparse
import random
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from scalebalancer.samples import generate_case, write_case


def main():
    """Generate sample cases."""
    parser = argparse.ArgumentParser(description="Generate random scale balancing samples")
    parser.add_argument("--count", type=int, default=3, help="Number of cases")
    parser.add_argument("--scales", type=int, default=8, help="Scales per case")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "-o", "--output-dir",
        default=str(Path(__file__).parent.parent / "samples"),
        help="Output directory",
    )
    args = parser.parse_args()
    
    rng = random.Random(args.seed)
    output_dir = Path(args.output_dir)
    
    for i in range(args.count):
        case = generate_case(args.scales, rng)
        input_path, expected_path = write_case(case, output_dir, f"case{i + 1}")
        print(f"Created {input_path.name} and {expected_path.name}")
    
    print(f"\nSample files generated in {output_dir}")


if __name__ == "__main__":
    main()
