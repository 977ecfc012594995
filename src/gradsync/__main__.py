"""Allow running as ``python -m gradsync``."""

import sys

from .cli import main

sys.exit(main())
