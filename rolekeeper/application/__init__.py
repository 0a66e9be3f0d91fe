"""Application layer: wiring and sample business services."""
