"""
Test suite for the rent-vs-buy value codec

Contains:
- tests/unit/          : Unit tests for codec, contracts, domain model and profile store
"""
