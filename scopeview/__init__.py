"""Oscilloscope display model: view settings, grid and cursor geometry, graph history and CSV/JSON exporters."""

__version__ = "3.3.3"