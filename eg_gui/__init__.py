"""Qt adapters for the grid engine (requires the ``gui`` extra)."""
