"""
Frequency bar charts for coded survey answers
"""

import pandas as pd
import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns
from typing import Optional

from config.settings import BAR_PALETTE, FIGURE_SIZE


def count_categories(df: pd.DataFrame, column: str, normalize: bool = False,
                     top_n: Optional[int] = None) -> pd.DataFrame:
    """
    Frequency table of one categorical column

    Args:
        df: Survey data
        column: Category column
        normalize: Also report each category's share of answers (percent)
        top_n: Keep only the most frequent categories

    Returns:
        DataFrame with columns category, count (and percent)
    """
    counts = df[column].dropna().value_counts()
    if top_n is not None:
        counts = counts.head(top_n)

    table = counts.rename_axis('category').reset_index(name='count')
    if normalize:
        total = df[column].notna().sum()
        table['percent'] = (table['count'] / total * 100).round(1) if total else 0.0
    return table


def plot_category_counts(df: pd.DataFrame, column: str, top_n: Optional[int] = None,
                         title: Optional[str] = None, palette: str = BAR_PALETTE,
                         ax: Optional[plt.Axes] = None) -> plt.Figure:
    """
    Horizontal bar chart of category frequencies

    Args:
        df: Survey data
        column: Category column
        top_n: Number of categories to show (None for all)
        title: Chart title
        palette: Seaborn palette name
        ax: Axes to draw on (a new figure is created if None)

    Returns:
        Matplotlib figure
    """
    table = count_categories(df, column, normalize=True, top_n=top_n)

    if ax is None:
        fig, ax = plt.subplots(figsize=FIGURE_SIZE)
    else:
        fig = ax.figure

    if title is None:
        title = f'Responses by {column}'

    if len(table) == 0:
        ax.text(0.5, 0.5, 'No responses', ha='center', va='center', transform=ax.transAxes)
        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.set_axis_off()
        return fig

    y_pos = np.arange(len(table))
    ax.barh(y_pos, table['count'], color=sns.color_palette(palette, len(table)),
            alpha=0.85, edgecolor='black', linewidth=0.5)

    ax.set_yticks(y_pos)
    ax.set_yticklabels(table['category'], fontsize=11)
    ax.set_xlabel('Number of Responses', fontsize=12, fontweight='bold')
    ax.set_title(title, fontsize=14, fontweight='bold', pad=20)
    ax.grid(axis='x', alpha=0.3)
    ax.invert_yaxis()

    # Value labels
    offset = table['count'].max() * 0.01
    for i, (count, percent) in enumerate(zip(table['count'], table['percent'])):
        ax.text(count + offset, i, f'{count} ({percent:.1f}%)',
                va='center', ha='left', fontsize=9)

    return fig


def plot_grouped_counts(df: pd.DataFrame, column: str, hue: str,
                        title: Optional[str] = None, palette: str = BAR_PALETTE,
                        ax: Optional[plt.Axes] = None) -> plt.Figure:
    """
    Grouped bar chart: frequencies of `column` split by `hue`

    Returns:
        Matplotlib figure
    """
    data = df.dropna(subset=[column, hue])

    if ax is None:
        fig, ax = plt.subplots(figsize=FIGURE_SIZE)
    else:
        fig = ax.figure

    order = data[column].value_counts().index.tolist()
    hue_order = data[hue].value_counts().index.tolist()

    sns.countplot(data=data, x=column, hue=hue, order=order, hue_order=hue_order,
                  palette=sns.color_palette(palette, max(len(hue_order), 1)), ax=ax)

    ax.set_title(title or f'{column} by {hue}', fontsize=14, fontweight='bold', pad=20)
    ax.set_xlabel(column, fontsize=12)
    ax.set_ylabel('Number of Responses', fontsize=12)
    ax.tick_params(axis='x', rotation=45)
    ax.grid(axis='y', alpha=0.3)
    if hue_order:
        ax.legend(title=hue, fontsize=10, framealpha=0.95)

    return fig
