# pnmrgba/__main__.py

import sys

from .pnmrgba import main

sys.exit(main())
