"""Test suite for framechain.

- unit/: Unit tests, grouped by layer (domain, application, core, infrastructure)
"""
