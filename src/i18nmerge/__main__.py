"""Allow running as `python -m i18nmerge`."""

import sys

from i18nmerge.cli import main

sys.exit(main())
