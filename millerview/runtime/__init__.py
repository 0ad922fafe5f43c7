"""Runtime orchestration package.

Exposes ``run_browser`` as the interactive entry point.
"""

from .app import run_browser

__all__ = ["run_browser"]
