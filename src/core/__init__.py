"""
Core protocols, domain primitives, and numerical helpers.

This module contains the foundational building blocks that the interval
engines depend on: ordering/successor contracts, lexical increment,
error kinds, float stepping math, and persisted record contracts.
"""
