"""Value objects, entities, repository interfaces and use cases for an online shop."""

__version__ = "0.1.0"