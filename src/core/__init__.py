"""
Core domain models, errors and contract validators.

This module contains the foundational building blocks that are independent
of external systems (payment rails, ownership registries, etc.).
"""
