"""
Mosaic plots for two coded survey questions

Column widths are the share of responses in each `x` category; within a
column, tile heights are the share of each `y` category given that `x`.
"""

import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.patches import Patch, Rectangle
from typing import Optional

from config.settings import FIGURE_SIZE, MOSAIC_PALETTE


def mosaic_table(df: pd.DataFrame, x: str, y: str) -> pd.DataFrame:
    """
    Long table of mosaic tiles

    Args:
        df: Survey data
        x: Column along the horizontal axis
        y: Column stacked within each x column

    Returns:
        DataFrame with columns x, y, count, x_share (marginal share of x)
        and y_share (share of y within x). Rows with a missing x or y are ignored.
    """
    counts = pd.crosstab(df[x], df[y])
    if counts.empty:
        return pd.DataFrame(columns=['x', 'y', 'count', 'x_share', 'y_share'])

    # Most frequent categories first
    counts = counts.loc[
        counts.sum(axis=1).sort_values(ascending=False, kind='stable').index,
        counts.sum(axis=0).sort_values(ascending=False, kind='stable').index
    ]

    total = counts.values.sum()
    x_totals = counts.sum(axis=1)

    tiles = counts.stack().rename('count').reset_index()
    tiles.columns = ['x', 'y', 'count']
    tiles['x_share'] = tiles['x'].map(x_totals) / total if total else 0.0
    tiles['y_share'] = tiles['count'] / tiles['x'].map(x_totals)
    return tiles


def plot_mosaic(df: pd.DataFrame, x: str, y: str, title: Optional[str] = None,
                palette: str = MOSAIC_PALETTE, gap: float = 0.01,
                ax: Optional[plt.Axes] = None) -> plt.Figure:
    """
    Draw a mosaic plot of two categorical columns

    Args:
        df: Survey data
        x: Column along the horizontal axis
        y: Column stacked within each x column
        title: Chart title
        palette: Seaborn palette for the y categories
        gap: Spacing between tiles (axis fraction)
        ax: Axes to draw on (a new figure is created if None)

    Returns:
        Matplotlib figure
    """
    tiles = mosaic_table(df, x, y)

    if ax is None:
        fig, ax = plt.subplots(figsize=FIGURE_SIZE)
    else:
        fig = ax.figure

    title = title or f'{y} by {x}'
    ax.set_title(title, fontsize=14, fontweight='bold', pad=20)

    if tiles['count'].sum() == 0:
        ax.text(0.5, 0.5, 'No responses', ha='center', va='center', transform=ax.transAxes)
        ax.set_axis_off()
        return fig

    x_order = pd.unique(tiles['x']).tolist()
    y_order = pd.unique(tiles['y']).tolist()
    colors = dict(zip(y_order, sns.color_palette(palette, len(y_order))))

    n_gaps = max(len(x_order) - 1, 0)
    width_scale = 1 - gap * n_gaps

    left = 0.0
    x_ticks = []
    for x_value in x_order:
        column = tiles[tiles['x'] == x_value]
        width = column['x_share'].iloc[0] * width_scale

        bottom = 0.0
        visible = column[column['count'] > 0]
        height_scale = 1 - gap * max(len(visible) - 1, 0)
        for row in visible.itertuples(index=False):
            height = row.y_share * height_scale
            ax.add_patch(Rectangle((left, bottom), width, height,
                                   facecolor=colors[row.y], edgecolor='white', linewidth=0.5))
            if height > 0.05 and width > 0.05:
                ax.text(left + width / 2, bottom + height / 2, f'{row.y_share:.0%}',
                        ha='center', va='center', fontsize=9)
            bottom += height + gap

        x_ticks.append(left + width / 2)
        left += width + gap

    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1)
    ax.set_xticks(x_ticks)
    ax.set_xticklabels(x_order, rotation=45, ha='right', fontsize=10)
    ax.set_xlabel(x, fontsize=12, fontweight='bold')
    ax.set_ylabel(f'Share of {y}', fontsize=12, fontweight='bold')

    legend_elements = [Patch(facecolor=colors[v], label=v) for v in y_order]
    ax.legend(handles=legend_elements, title=y, loc='center left',
              bbox_to_anchor=(1.01, 0.5), fontsize=10, framealpha=0.95)

    return fig
