"""
Node table construction for Sankey diagrams

Nodes are laid out sources first, then targets. Each side is ordered by total
edge value (largest first), ties broken by first appearance in the edge table.

By default a node is identified by its role *and* label, so a category that
shows up on both sides (e.g. 'Other') becomes two nodes. Passing
merge_shared_labels=True identifies nodes by label only: a target label that
is also a source label collapses into the source node. That mode exists for
older figures whose inputs were renamed by hand; see
data_engineering.cleaning.disambiguate_labels.
"""

import pandas as pd
from typing import List, Optional

SOURCE = 'source'
TARGET = 'target'

NODE_COLUMNS = ['label', 'role', 'group']


def ordered_labels(edges: pd.DataFrame, column: str) -> List[str]:
    """
    Distinct labels of one edge column, by descending total value

    Args:
        edges: Edge table (source, target, value)
        column: 'source' or 'target'

    Returns:
        List of labels, heaviest first, ties in first-seen order
    """
    totals = edges.groupby(column, sort=False)['value'].sum()
    # Stable sort keeps first-seen order among equal totals
    totals = totals.sort_values(ascending=False, kind='stable')
    return totals.index.tolist()


def build_node_table(
    edges: pd.DataFrame,
    target_group: Optional[str] = 'Target',
    merge_shared_labels: bool = False
) -> pd.DataFrame:
    """
    Build the node table for a set of edges

    Args:
        edges: Edge table (source, target, value), already filtered
        target_group: Color group shared by all target nodes
            (None gives each target its own group)
        merge_shared_labels: Identify nodes by label only, merging a target
            into the source node with the same label

    Returns:
        DataFrame with columns label, role, group; the index is the node index

    Raises:
        ValueError: If target_group equals a source label
    """
    sources = ordered_labels(edges, 'source')
    targets = ordered_labels(edges, 'target')

    # Source groups are their own labels, so the shared group name must not be one
    if target_group is not None and target_group in sources:
        raise ValueError(
            f'Target group {target_group!r} is also a source label; '
            f'its color group would merge with the source node.\n'
            f'   Pick another target_group or rename the source category.'
        )

    rows = [
        {'label': label, 'role': SOURCE, 'group': label}
        for label in sources
    ]

    if merge_shared_labels:
        source_set = set(sources)
        merged = [label for label in targets if label in source_set]
        if merged:
            print(f'  ⚠️  Merging {len(merged)} label(s) shared by sources and targets: '
                  f'{", ".join(merged)}')
        targets = [label for label in targets if label not in source_set]

    rows.extend(
        {
            'label': label,
            'role': TARGET,
            'group': target_group if target_group is not None else label,
        }
        for label in targets
    )

    return pd.DataFrame(rows, columns=NODE_COLUMNS)


def node_groups(nodes: pd.DataFrame) -> List[str]:
    """Distinct node groups in node order"""
    return pd.unique(nodes['group']).tolist()
