"""
Core geometric primitives, algebraic capabilities, and numeric tolerances.

This module contains the foundational value types of the 2D Euclidean plane
that are independent of rendering, path composition, and transform engines.
"""
