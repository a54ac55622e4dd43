"""
Shared compute infrastructure for pygoalseek.

IMPORTANT: This is NOT where root-finding algorithms live. Those go in
roots/backends/. This module contains shared utilities used by them.

Submodules:
    timing: Execution timing utilities
"""

from pygoalseek.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
