"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O (FS/network/time randomness); build small ad-hoc tables instead.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
