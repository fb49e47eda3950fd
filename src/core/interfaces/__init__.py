"""Core interfaces.

Structural contracts (Protocol) implemented by concrete adapters and
presenters, so the core depends on abstractions only.
"""
