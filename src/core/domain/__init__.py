"""Domain models and constants of the transform protocol.

Why:
- Pure data structures (Pydantic v2) and the closed enumerations of the wire.
- The domain knows nothing about HTTP, the CLI or XML parsing.
"""
