"""
Core value types and wire contracts.

This module contains the foundational building blocks that are independent
of external systems (databases, persistence frameworks, etc.).
"""
