"""
Sankey diagram rendering (plotly)
"""

import plotly.graph_objects as go
from pathlib import Path
from typing import Optional, Union

from analysis.sankey import SankeyData, to_rgba_string
from config.settings import LINK_ALPHA, PLOTLY_THEME, SANKEY_LAYOUT, STATIC_FORMATS

FALLBACK_COLOR = '#95a5a6'


def create_sankey_figure(sankey: SankeyData, title: Optional[str] = None,
                         link_alpha: float = LINK_ALPHA,
                         height: int = SANKEY_LAYOUT['height']) -> go.Figure:
    """
    Create a Sankey diagram from prepared node/link tables

    Args:
        sankey: Output of build_sankey_data
        title: Chart title
        link_alpha: Opacity of link colors (0-1)
        height: Figure height in pixels

    Returns:
        Plotly figure
    """
    color_for = sankey.colors.as_dict()

    node_colors = [color_for.get(g, FALLBACK_COLOR) for g in sankey.nodes['group']]
    link_colors = [
        to_rgba_string(color_for.get(g, FALLBACK_COLOR), link_alpha)
        for g in sankey.links['group']
    ]

    fig = go.Figure(data=[go.Sankey(
        arrangement='snap',
        node=dict(
            label=sankey.nodes['label'].tolist(),
            color=node_colors,
            pad=SANKEY_LAYOUT['node_pad'],
            thickness=SANKEY_LAYOUT['node_thickness'],
            line=dict(color='white', width=0.5)
        ),
        link=dict(
            source=sankey.links['source'].tolist(),
            target=sankey.links['target'].tolist(),
            value=sankey.links['value'].tolist(),
            color=link_colors
        )
    )])

    fig.update_layout(
        title=title,
        height=height,
        font_size=SANKEY_LAYOUT['font_size'],
        template=PLOTLY_THEME
    )

    return fig


def save_figure(fig: go.Figure, output_path: Union[str, Path]) -> Path:
    """
    Save a plotly figure, picking the writer from the file suffix

    .html files are written standalone; png/svg/pdf go through kaleido.

    Raises:
        ValueError: If the suffix is not a supported format
    """
    output_path = Path(output_path)
    suffix = output_path.suffix.lower().lstrip('.')
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if suffix == 'html':
        fig.write_html(str(output_path), include_plotlyjs='cdn')
    elif suffix in STATIC_FORMATS:
        fig.write_image(str(output_path), scale=2)
    else:
        raise ValueError(f'Unsupported figure format: {output_path.suffix!r}')

    return output_path
