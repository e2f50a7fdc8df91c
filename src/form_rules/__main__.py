"""Allow ``python -m form_rules``."""

import sys

from form_rules.main import main

sys.exit(main())
