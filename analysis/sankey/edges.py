"""
Edge aggregation for Sankey diagrams

Groups (source, target) category pairs into weighted edges.

Usage:
    from analysis.sankey.edges import aggregate_edges

    edges = aggregate_edges(survey_df, left='role', right='need', min_weight=2)
"""

import pandas as pd
from typing import Any, Callable, Iterable, Optional, Union

EDGE_COLUMNS = ['source', 'target', 'value']

# A column label / key / index into a row, or a function of the row
FieldSelector = Union[Callable[[Any], Any], Any]


def _select(row, selector: FieldSelector):
    if callable(selector):
        return selector(row)
    return row[selector]


def _extract_pairs(records, left: FieldSelector, right: FieldSelector,
                   weight: Optional[FieldSelector] = None) -> pd.DataFrame:
    """Pull the left/right (and weight) fields out of each record"""
    if isinstance(records, pd.DataFrame):
        if any(callable(s) for s in (left, right, weight)):
            rows = [row for _, row in records.iterrows()]
        else:
            pairs = pd.DataFrame({
                'source': records[left].values,
                'target': records[right].values,
            })
            pairs['value'] = records[weight].values if weight is not None else 1
            return pairs
    else:
        rows = list(records)

    pairs = pd.DataFrame({
        'source': [_select(row, left) for row in rows],
        'target': [_select(row, right) for row in rows],
    }, dtype=object)
    if weight is not None:
        pairs['value'] = [_select(row, weight) for row in rows]
    else:
        pairs['value'] = 1
    return pairs


def _check_min_weight(min_weight):
    if min_weight is None:
        return
    if isinstance(min_weight, bool) or not isinstance(min_weight, int) or min_weight < 1:
        raise ValueError(f'min_weight must be an integer >= 1, got {min_weight!r}')


def empty_edges() -> pd.DataFrame:
    """Edge table with no rows"""
    return pd.DataFrame({
        'source': pd.Series(dtype=object),
        'target': pd.Series(dtype=object),
        'value': pd.Series(dtype='int64'),
    })


def filter_edges(edges: pd.DataFrame, min_weight: Optional[int] = None) -> pd.DataFrame:
    """
    Drop edges whose value is below a threshold

    Args:
        edges: Edge table (source, target, value)
        min_weight: Minimum value to keep (None keeps everything)

    Returns:
        Filtered edge table with a fresh index
    """
    _check_min_weight(min_weight)
    if min_weight is None:
        return edges.reset_index(drop=True)
    return edges[edges['value'] >= min_weight].reset_index(drop=True)


def aggregate_edges(
    records: Union[pd.DataFrame, Iterable],
    left: FieldSelector = 0,
    right: FieldSelector = 1,
    weight: Optional[FieldSelector] = None,
    min_weight: Optional[int] = None
) -> pd.DataFrame:
    """
    Aggregate (left, right) category pairs into weighted edges

    Rows with a missing left or right category (or a missing weight, when
    weights are given) are dropped before grouping, and edges whose total
    weight is not positive are dropped after it.
    Pairs are ordered: ('Fisher', 'Tide') and ('Tide', 'Fisher') are different
    edges. Groups keep the order in which each pair first appears.

    Args:
        records: DataFrame or iterable of rows (tuples, dicts, Series...)
        left: Selector for the source category (column name, key, index or callable)
        right: Selector for the target category
        weight: Optional selector for a per-row weight (default: every row counts 1)
        min_weight: Drop edges with a total value below this (integer >= 1)

    Returns:
        DataFrame with columns source, target, value

    Raises:
        ValueError: If min_weight is not an integer >= 1
    """
    _check_min_weight(min_weight)

    pairs = _extract_pairs(records, left, right, weight)
    required = ['source', 'target'] if weight is None else ['source', 'target', 'value']
    pairs = pairs.dropna(subset=required)

    if len(pairs) == 0:
        return empty_edges()

    pairs['source'] = pairs['source'].astype(str)
    pairs['target'] = pairs['target'].astype(str)
    if weight is not None:
        pairs['value'] = pd.to_numeric(pairs['value'])

    edges = (
        pairs
        .groupby(['source', 'target'], sort=False)['value']
        .sum()
        .reset_index()
    )
    if weight is None:
        edges['value'] = edges['value'].astype('int64')

    # Links must carry a positive flow
    edges = edges[edges['value'] > 0]

    return filter_edges(edges[EDGE_COLUMNS], min_weight)
