from .naive import NaiveRefutationReport
from ._check import RefutationCheck

__all__ = ["NaiveRefutationReport", "RefutationCheck"]
