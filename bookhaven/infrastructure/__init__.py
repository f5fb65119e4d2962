"""Infrastructure layer: SQLAlchemy persistence (implements application ports)."""
