"""Qt item models over the grid engine."""

from eg_gui.models.grid_table_model import GridTableModel

__all__ = ["GridTableModel"]
