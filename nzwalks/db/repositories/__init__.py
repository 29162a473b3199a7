"""
Per-resource repository modules for database access.

Each module exposes plain functions taking a `Session`. They are the only
code that writes to the store; missing rows are reported as ``None``.
"""
