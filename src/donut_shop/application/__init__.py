"""Application layer - Use cases and port definitions.

This layer contains:
- Use Cases: Settlement of payments against card accounts
- Ports: Abstract interfaces for card storage and locking

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
