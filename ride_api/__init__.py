"""
Top-level package for the Ride API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
