"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Event dispatcher and event handlers
- Structured logging adapter
- Database repositories

Structure:
- events/: In-memory event dispatcher and handlers
- logging/: structlog-based logger adapter
- persistence/: SQLAlchemy models, repositories and database session management

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
