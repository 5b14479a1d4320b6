"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real filesystem access; console helpers get in-memory streams.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
