"""Allow ``python -m consoleprompts``."""

import sys

from consoleprompts.cli import main

sys.exit(main())
