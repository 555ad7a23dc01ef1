"""Molecular fragmentation: atoms and fragments, covalent-radius connectivity, broken bonds, nuclear graphs and distance screening."""

__version__ = "0.0.1"
__all__ = ["structures", "topology", "screening"]