"""Application layer: read queries, DTOs and ports."""
