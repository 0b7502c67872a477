"""HTTP API for the temple site."""
