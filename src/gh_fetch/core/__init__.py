"""Core token acquisition and download logic for gh-fetch."""
