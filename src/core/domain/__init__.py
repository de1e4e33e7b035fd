"""Domain models and errors.

Rules:
- Pure data structures (Pydantic v2) and the error taxonomy live here.
- The domain knows nothing about boto3, editors or terminals.
"""
