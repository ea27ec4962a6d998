"""Application layer: ports, use cases and the sync gateway."""
