"""Application layer - request DTOs, service wiring and use cases."""
