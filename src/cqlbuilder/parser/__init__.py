"""Loading of declarative query documents."""

from cqlbuilder.parser.loader import QueryLoader

__all__ = [
    "QueryLoader",
]
