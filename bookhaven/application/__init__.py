"""Application layer: use cases, DTOs and repository ports."""
