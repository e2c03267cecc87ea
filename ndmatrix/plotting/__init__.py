"""Plotly figures for array contents."""

from ndmatrix.plotting.core import plot_heatmap, plot_distribution

__all__ = [
    "plot_heatmap",
    "plot_distribution",
]
