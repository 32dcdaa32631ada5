"""ViewModels exposing Qt signals for views."""

from eg_gui.viewmodels.grid_vm import GridViewModel

__all__ = ["GridViewModel"]
