"""
perfpath - Performance-Path Analytics

Public API for drawdown, gain, streak and rolling-window analysis of
per-period return series.
"""

import logging
from importlib.metadata import version

try:
    __version__ = version("perfpath")
except Exception:
    __version__ = "0.0.0.dev"  # Fallback for development

# Silent until the host configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    "__version__",
]
