"""Core interfaces (Protocol).

- Contracts implemented by adapters (store, editor, terminal UI).
- The pipeline depends on these abstractions, never on concrete adapters.
"""
