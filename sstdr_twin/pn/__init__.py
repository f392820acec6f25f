"""PN code generation for SSTDR probing signals."""

from sstdr_twin.pn.generator import generate_pn_code, interpolation_factor

__all__ = [
    "generate_pn_code",
    "interpolation_factor",
]
