"""Shared utilities — constants, settings, and cross-cutting concerns.

Rules
-----
* No business logic.
* No I/O beyond reading environment variables.
* Importable by any layer.
"""
