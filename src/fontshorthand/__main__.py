"""Allow ``python -m fontshorthand``."""

import sys

from fontshorthand.cli import main

sys.exit(main())
