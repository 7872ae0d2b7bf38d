"""Allow ``python -m breakout``."""

import sys

from breakout.main import main

sys.exit(main())
