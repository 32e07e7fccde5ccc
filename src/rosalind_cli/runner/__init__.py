"""Task runner: registry, validation, dispatch and output.

Provides:
- Settings loaded from the environment / .env
- Structured logging
- The single-shot CLI pipeline
"""
