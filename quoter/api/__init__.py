"""HTTP API for the quoter."""
