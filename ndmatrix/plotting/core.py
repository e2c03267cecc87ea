"""
Core plotting functions using Plotly.

Interactive views of matrix contents.
"""

import numpy as np
import plotly.graph_objects as go

from ndmatrix.base.errors import UnsupportedRankError
from ndmatrix.utils.config import Config


def _layout(fig: go.Figure, title: str) -> go.Figure:
    fig.update_layout(
        title=title,
        template=Config.get("plotting.theme"),
        width=Config.get("plotting.width"),
        height=Config.get("plotting.height"),
    )
    return fig


def plot_heatmap(arr, title: str = "Matrix") -> go.Figure:
    """
    Plot a rank-2 array as a heatmap.

    Row 0 is drawn at the top, matching the printed layout.

    Parameters
    ----------
    arr : Matrix or NDArray
        Rank-2 data
    title : str
        Figure title

    Returns
    -------
    go.Figure
        Plotly figure
    """
    values = arr.to_numpy()
    if values.ndim != 2:
        raise UnsupportedRankError(f"Heatmap needs a 2D array, got {values.ndim}D")

    fig = go.Figure(
        go.Heatmap(
            z=values,
            x=np.arange(values.shape[1]),
            y=np.arange(values.shape[0]),
            colorscale=Config.get("plotting.colorscale"),
        )
    )
    fig.update_yaxes(autorange='reversed', title_text='row')
    fig.update_xaxes(title_text='column')
    return _layout(fig, title)


def plot_distribution(arr, nbins: int = 50, title: str = "Value Distribution") -> go.Figure:
    """
    Histogram of every element of an array.

    Parameters
    ----------
    arr : Matrix or NDArray
        Any rank
    nbins : int
        Number of histogram bins
    title : str
        Figure title

    Returns
    -------
    go.Figure
        Plotly figure
    """
    values = arr.to_numpy().ravel(order='F')

    fig = go.Figure(
        go.Histogram(
            x=values,
            nbinsx=nbins,
            marker=dict(color='#00D9FF'),
        )
    )

    mean = float(values.mean()) if values.size else 0.0
    fig.add_vline(
        x=mean,
        line_dash='dash',
        line_color='white',
        annotation_text=f'Mean: {mean:.4g}',
    )
    fig.update_xaxes(title_text='value')
    fig.update_yaxes(title_text='count')
    return _layout(fig, title)
