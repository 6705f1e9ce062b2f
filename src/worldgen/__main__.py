"""Allow running as ``python -m worldgen``."""

import sys

from .cli import main

sys.exit(main())
