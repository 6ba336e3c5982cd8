"""Fixed-width multi-word integers, powers, decimal floats and fractions."""

__version__ = "0.1.0"
__all__ = ["bigint", "powers", "bigfloat", "fraction", "demo"]