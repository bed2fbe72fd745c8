"""
Sankey Data Builder

Runs the full chain for one pair of categorical columns:
1. Aggregate (source, target) pairs into weighted edges
2. Build the node table (sources first, then targets)
3. Resolve edge endpoints to node indices
4. Assign a color per node group

Usage:
    from analysis.sankey import build_sankey_data

    sankey = build_sankey_data(survey_df, left='role', right='need',
                               target_group='Need', min_weight=2, rng=42)
    sankey.nodes   # label, role, group
    sankey.links   # source, target, value, group
    sankey.colors  # ColorScale(domain, range)
"""

import json
import pandas as pd
from pathlib import Path
from typing import Any, Dict, NamedTuple, Optional, Union

from .colors import ColorScale, RandomSource, assign_colors
from .edges import FieldSelector, aggregate_edges
from .links import resolve_links
from .nodes import build_node_table, node_groups


class SankeyData(NamedTuple):
    nodes: pd.DataFrame
    links: pd.DataFrame
    colors: ColorScale


def build_sankey_data(
    records,
    left: FieldSelector = 0,
    right: FieldSelector = 1,
    weight: Optional[FieldSelector] = None,
    min_weight: Optional[int] = None,
    target_group: Optional[str] = 'Target',
    target_color: Optional[str] = None,
    merge_shared_labels: bool = False,
    palette: str = 'husl',
    rng: RandomSource = None
) -> SankeyData:
    """
    Build renderer-ready Sankey inputs from two categorical fields

    Args:
        records: DataFrame or iterable of rows
        left: Selector for the source category
        right: Selector for the target category
        weight: Optional selector for a per-row weight
        min_weight: Drop links with a total value below this
        target_group: Color group shared by all targets (None: one group per target)
        target_color: Fixed color for the shared target group
        merge_shared_labels: Treat a label on both sides as one node
        palette: Seaborn palette for the sampled colors
        rng: Random source for color sampling

    Returns:
        SankeyData(nodes, links, colors)
    """
    edges = aggregate_edges(records, left=left, right=right,
                            weight=weight, min_weight=min_weight)

    nodes = build_node_table(edges, target_group=target_group,
                             merge_shared_labels=merge_shared_labels)
    links = resolve_links(edges, nodes, merge_shared_labels=merge_shared_labels)

    groups = node_groups(nodes)
    # A pinned color only makes sense for the shared target group, which sits last
    pin = target_color if target_group is not None and groups and groups[-1] == target_group else None
    colors = assign_colors(groups, fixed_color=pin, palette=palette, rng=rng)

    return SankeyData(nodes=nodes, links=links, colors=colors)


def sankey_to_dict(sankey: SankeyData) -> Dict[str, Any]:
    """
    Convert Sankey inputs to plain JSON-serializable structures

    Returns:
        Dict with nodes, links, colors and summary metadata
    """
    links = [
        {
            'source': int(row.source),
            'target': int(row.target),
            'value': row.value.item() if hasattr(row.value, 'item') else row.value,
            'group': row.group,
        }
        for row in sankey.links.itertuples(index=False)
    ]
    return {
        'nodes': sankey.nodes.to_dict(orient='records'),
        'links': links,
        'colors': {
            'domain': list(sankey.colors.domain),
            'range': list(sankey.colors.range),
        },
        'metadata': {
            'total_nodes': len(sankey.nodes),
            'total_flows': len(sankey.links),
            'total_volume': sum(link['value'] for link in links),
        }
    }


def export_sankey_json(sankey: SankeyData, output_path: Union[str, Path]) -> Path:
    """Write Sankey inputs to a JSON file"""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w') as f:
        json.dump(sankey_to_dict(sankey), f, indent=2)

    return output_path
