"""Domain package."""

from . import entities
from . import query
from . import repositories
from . import schemas
from . import services

__all__ = ['entities', 'query', 'repositories', 'schemas', 'services']
