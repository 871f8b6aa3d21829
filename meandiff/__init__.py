from .data import CausalDataset, GenerationResult, TRUE_EFFECT, generate
from .estimators.naive import DifferenceInMeans, DifferenceInMeansResult, estimate
from .refutations import NaiveRefutationReport, RefutationCheck
from .refutations._check import Assumption
from .theory import expected_naive_estimate

__all__ = [
    "CausalDataset", "GenerationResult", "TRUE_EFFECT", "generate",
    "DifferenceInMeans", "DifferenceInMeansResult", "estimate",
    "NaiveRefutationReport", "RefutationCheck",
    "Assumption",
    "expected_naive_estimate",
]
