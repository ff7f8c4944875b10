"""Runtime engine version."""

from .main import xhsign

__version__ = xhsign.ENGINE_VERSION


__all__ = ["__version__"]
