"""Application layer - factories and the composition engine."""
