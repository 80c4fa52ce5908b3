"""
Linear-algebra kernel for the visualization suite.

This package contains the pure, stateless numeric core shared by every
page of the suite: vectors, fixed-size matrices, determinants, rank,
eigen decomposition and 3D transform builders, plus payload contracts.
"""
