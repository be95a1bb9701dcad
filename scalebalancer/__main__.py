import sys

from scalebalancer.cli import main

sys.exit(main())
