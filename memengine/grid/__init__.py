from .sparse_matrix import Position, SparseMatrix

__all__ = ["Position", "SparseMatrix"]
