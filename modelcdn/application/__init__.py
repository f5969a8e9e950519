"""Application layer: use cases, services, DTOs and protocols."""
