"""Allow `python -m isocurrency.codegen`."""

import sys

from .cli import main

sys.exit(main())
