"""
Core domain models and contract schemas.

This module contains the foundational building blocks that are independent
of any concrete executor (the external side of forwarded calls).
"""
