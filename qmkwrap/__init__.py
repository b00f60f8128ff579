"""qmkwrap - QMK build wrapper with transient secret codes."""

from importlib.metadata import distribution

from .models.build import BuildRequest, BuildResult


__version__ = distribution(__package__ or "qmkwrap").version

__all__ = [
    "BuildRequest",
    "BuildResult",
    "__version__",
]

# Import CLI after setting __version__ to avoid circular imports
from .cli import app, main


__all__ += ["app", "main"]
