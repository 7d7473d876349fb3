"""minmax — variadic min, max and clamp over ordered values."""

from minmax.domain.ordering import clamp, max, max_of, min, min_of

__version__ = "0.1.0"

__all__ = ["__version__", "clamp", "max", "max_of", "min", "min_of"]
