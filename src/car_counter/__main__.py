"""Allow ``python -m car_counter``."""

import sys

from .cli import main

sys.exit(main())
