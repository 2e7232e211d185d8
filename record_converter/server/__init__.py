"""HTTP service exposing the converter over FastAPI."""
