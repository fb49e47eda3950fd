"""Domain models and entities.

Plain, strict data structures (Pydantic v2). The domain knows nothing about
HTTP, the CLI, or terminal rendering.
"""
