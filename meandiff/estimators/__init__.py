from .naive import DifferenceInMeans, estimate

__all__ = ["DifferenceInMeans", "estimate"]
