"""
Core value codec, numeric primitives, domain models and contracts.

This module contains the foundational building blocks that are independent
of the UI and of where saved profiles are stored.
"""
