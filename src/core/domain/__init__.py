"""Domain models and entities.

Why:
- Pure, strict data structures (Pydantic v2) for the RPC contract.
- The domain knows nothing about HTTP, FastAPI or the CLI.
"""
