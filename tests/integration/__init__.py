"""Integration tests.

Purpose
- Exercise the file helpers against the real filesystem.

Guidelines
- Every test works inside pytest's ``tmp_path``.
- Mark as 'integration'; the conftest hook does this automatically.
"""
