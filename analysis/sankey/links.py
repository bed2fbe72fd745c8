"""
Resolve edge endpoints to node indices

Turns an edge table of labels into the integer link table a Sankey renderer
expects. Every endpoint must resolve; an edge that points at a label missing
from the node table means the nodes were built from a different edge set.
"""

import pandas as pd
from typing import Dict, Hashable

from .nodes import SOURCE, TARGET

LINK_COLUMNS = ['source', 'target', 'value', 'group']


def node_index(nodes: pd.DataFrame, merge_shared_labels: bool = False) -> Dict[Hashable, int]:
    """
    Map node keys to their position in the node table

    Keys are (role, label) tuples, or bare labels when merge_shared_labels
    is set. When a key repeats, the first position wins.
    """
    index = {}
    for position, (label, role) in enumerate(zip(nodes['label'], nodes['role'])):
        key = label if merge_shared_labels else (role, label)
        index.setdefault(key, position)
    return index


def resolve_links(
    edges: pd.DataFrame,
    nodes: pd.DataFrame,
    merge_shared_labels: bool = False
) -> pd.DataFrame:
    """
    Replace edge labels with node indices

    Args:
        edges: Edge table (source, target, value)
        nodes: Node table built from the same edges
        merge_shared_labels: Must match the flag used to build the nodes

    Returns:
        DataFrame with columns source, target (int node indices), value and
        group (the source label, so links take their source node's color)

    Raises:
        ValueError: If any endpoint is not in the node table, or if
            merge_shared_labels is set and a label appears more than once
    """
    if merge_shared_labels:
        repeated = nodes.loc[nodes['label'].duplicated(), 'label'].unique().tolist()
        if repeated:
            raise ValueError(
                f'Node table has repeated labels {repeated}; label lookup would be ambiguous.\n'
                f'   Build the nodes with merge_shared_labels=True as well.'
            )

    index = node_index(nodes, merge_shared_labels)

    def lookup(label, role):
        return index.get(label if merge_shared_labels else (role, label))

    source_idx = [lookup(label, SOURCE) for label in edges['source']]
    target_idx = [lookup(label, TARGET) for label in edges['target']]

    missing = sorted(
        {f'{SOURCE} {label!r}' for label, idx in zip(edges['source'], source_idx) if idx is None}
        | {f'{TARGET} {label!r}' for label, idx in zip(edges['target'], target_idx) if idx is None}
    )
    if missing:
        raise ValueError(
            f'Edge endpoints not found in node table: {", ".join(missing)}\n'
            f'   Build the node table from the same (filtered) edges you resolve.'
        )

    links = pd.DataFrame({
        'source': pd.Series(source_idx, dtype='int64'),
        'target': pd.Series(target_idx, dtype='int64'),
        'value': edges['value'].to_numpy(),
        'group': edges['source'].to_numpy(dtype=object),
    })
    return links[LINK_COLUMNS]
