"""Allow running hidden-words with ``python -m hiddenwords``."""

import sys

from .main import main

sys.exit(main())
