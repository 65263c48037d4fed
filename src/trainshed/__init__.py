"""trainshed: model railway catalog and collection toolkit."""

__version__ = "0.1.0"
