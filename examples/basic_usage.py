"""Basic usage example for the scale balancer."""

import io
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from scalebalancer.balancing import balance_each_scale
from scalebalancer.ingestion import parse_scales
from scalebalancer.pipeline import BalancingPipeline
from scalebalancer.reporting import report_changes
from scalebalancer.shared.config import Settings

DEFINITIONS = """\
# name,left,right
Mobile,Arm,Bird
Arm,Moon,Star
Moon,3,5
Star,2,2
Bird,9,1
"""


def main():
    """Example usage of the balancing pipeline."""
    
    # Example 1: Step by step
    print("=" * 60)
    print("Example 1: Parse, balance and report step by step")
    print("=" * 60)
    
    registry = parse_scales(io.StringIO(DEFINITIONS))
    balance_each_scale(registry)
    report_changes(sys.stdout, registry)
    
    for scale in registry:
        print(f"  {scale.name}: total mass {scale.mass}")
    
    # Example 2: Pipeline with settings
    print("\n" + "=" * 60)
    print("Example 2: Pipeline with JSON output")
    print("=" * 60)
    
    settings = Settings()
    settings.reporting.format = "json"
    settings.balancing.order = "topological"
    BalancingPipeline(settings).run(io.StringIO(DEFINITIONS), sys.stdout)


if __name__ == "__main__":
    main()
