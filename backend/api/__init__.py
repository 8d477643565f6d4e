"""HTTP API for soil nail layout generation."""
