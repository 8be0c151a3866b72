"""Infrastructure layer module."""

from . import storage

__all__ = ['storage']
