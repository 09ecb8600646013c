"""Console display helpers for gh-fetch."""
