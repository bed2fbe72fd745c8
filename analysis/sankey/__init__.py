"""
Sankey Input Builder

Node/link tables and color scales for Sankey diagrams of two categorical fields
"""

from .edges import aggregate_edges, filter_edges
from .nodes import build_node_table, node_groups
from .links import resolve_links, node_index
from .colors import ColorScale, assign_colors, sample_colors, to_rgba_string
from .builder import SankeyData, build_sankey_data, sankey_to_dict, export_sankey_json

__all__ = [
    'aggregate_edges',
    'filter_edges',
    'build_node_table',
    'node_groups',
    'resolve_links',
    'node_index',
    'ColorScale',
    'assign_colors',
    'sample_colors',
    'to_rgba_string',
    'SankeyData',
    'build_sankey_data',
    'sankey_to_dict',
    'export_sankey_json',
]
