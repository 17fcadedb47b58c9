# pnmrgba/__init__.py

from .pnmrgba import *
from .pnmrgba import __all__, __doc__, __version__
