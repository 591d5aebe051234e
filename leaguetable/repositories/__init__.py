"""Repository interfaces and implementations.

This package defines abstract repository interfaces for the league entities and
concrete implementations, such as the SQLite adapters under
:mod:`repositories.sqlite`.
"""
