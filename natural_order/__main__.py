"""Allow running as `python -m natural_order`."""

import sys

from natural_order.cli import main

sys.exit(main())
