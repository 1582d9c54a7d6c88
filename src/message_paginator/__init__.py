"""Split long messages into byte-limited [k/N] chunks for SMS and mesh radios."""

from .core import Paginator, WordTooLongError, paginate

__all__ = ["Paginator", "WordTooLongError", "paginate"]
