"""Allow ``python -m lovefold``."""
import sys

from .cli import main

sys.exit(main())
