"""Terminal adapters for the grid engine."""
