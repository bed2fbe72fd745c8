"""
Chart builders for the survey figures
"""

from .sankey import create_sankey_figure, save_figure
from .bar_charts import count_categories, plot_category_counts, plot_grouped_counts
from .mosaic import mosaic_table, plot_mosaic

__all__ = [
    'create_sankey_figure',
    'save_figure',
    'count_categories',
    'plot_category_counts',
    'plot_grouped_counts',
    'mosaic_table',
    'plot_mosaic',
]
