"""Dense real matrices (matrix) with determinants, cofactors and inverses (linalg)."""

__version__ = "0.1.0"
__all__ = ["matrix", "linalg"]