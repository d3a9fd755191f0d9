from importlib.metadata import PackageNotFoundError, version

from .errors import *
from .auth import *
from .models import *
from .managers import *
from .client import *

try:
    __version__ = version("cachecord.py")
except PackageNotFoundError:
    __version__ = "0.1.dev0"

del version, PackageNotFoundError
