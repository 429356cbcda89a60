"""
Splitwise expense scripts.

- core/: Configuration, logging, exceptions, utilities
- api/: Request schemas, request builders, response interpreters, HTTP client
- cli/: Flag parsing, the shared script harness and the three commands
"""

__version__ = "1.0.0"
