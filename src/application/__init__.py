"""Application layer - Use cases and orchestration.

This layer contains the application's write use cases following the CQRS
pattern:
- Commands: Write operations that change state

Structure:
- commands/: Command dataclasses
- commands/handlers/: One handler per command, returning Result types

The application layer orchestrates domain logic but contains no business
rules. Handlers emit domain events through the dispatcher only after the
corresponding repository write succeeded.
"""
