"""
Feature modules for the WalkMate client.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for request bodies and query parameters
- service.py: One method per backend operation
- exceptions.py: Module-specific exceptions

The tracking module holds the client-side exercise state machines and makes
no backend calls.
"""
