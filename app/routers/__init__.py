from . import health
from . import unit

__all__ = ["health", "unit"]
