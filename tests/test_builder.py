import json

import pandas as pd
import pytest

from analysis.sankey import build_sankey_data, export_sankey_json, sankey_to_dict


def test_scenario_end_to_end(scenario_rows):
    sankey = build_sankey_data(scenario_rows, target_group='Need', rng=0)

    assert sankey.nodes['label'].tolist() == ['Fisher', 'Diver', 'Tide', 'Wave']
    assert sankey.links[['source', 'target', 'value']].values.tolist() == [[0, 2, 2], [1, 3, 1]]
    assert sankey.colors.domain == ['Fisher', 'Diver', 'Need']


def test_threshold_drops_orphan_nodes(scenario_rows):
    sankey = build_sankey_data(scenario_rows, target_group='Need', min_weight=2, rng=0)

    assert sankey.nodes['label'].tolist() == ['Fisher', 'Tide']
    assert sankey.links.values.tolist() == [[0, 1, 2, 'Fisher']]
    assert sankey.colors.domain == ['Fisher', 'Need']


def test_every_node_group_has_a_color(survey_df):
    sankey = build_sankey_data(survey_df, left='role', right='need', rng=3)

    colors = sankey.colors.as_dict()
    assert set(sankey.nodes['group']) == set(colors)
    assert set(sankey.links['group']) <= set(colors)


def test_target_color_is_pinned(scenario_rows):
    sankey = build_sankey_data(scenario_rows, target_group='Need', target_color='#cccccc', rng=0)

    assert sankey.colors.as_dict()['Need'] == '#cccccc'


def test_target_color_ignored_without_shared_group(scenario_rows):
    sankey = build_sankey_data(scenario_rows, target_group=None, target_color='#cccccc', rng=0)

    assert sankey.colors.domain == ['Fisher', 'Diver', 'Tide', 'Wave']
    assert '#cccccc' not in sankey.colors.range


def test_empty_result_is_not_an_error(scenario_rows):
    sankey = build_sankey_data(scenario_rows, min_weight=5)

    assert len(sankey.nodes) == 0
    assert len(sankey.links) == 0
    assert sankey.colors.domain == []


def test_sankey_to_dict_is_json_serializable(survey_df):
    sankey = build_sankey_data(survey_df, left='role', right='need', rng=0)

    data = sankey_to_dict(sankey)
    json.dumps(data)

    assert data['metadata'] == {'total_nodes': len(sankey.nodes),
                                'total_flows': len(sankey.links),
                                'total_volume': 6}
    assert data['nodes'][0] == {'label': 'Fisher', 'role': 'source', 'group': 'Fisher'}


def test_export_sankey_json(tmp_path, scenario_rows):
    sankey = build_sankey_data(scenario_rows, target_group='Need', rng=0)

    path = export_sankey_json(sankey, tmp_path / 'nested' / 'scenario.json')

    with open(path) as f:
        data = json.load(f)
    assert data['links'][0] == {'source': 0, 'target': 2, 'value': 2, 'group': 'Fisher'}
    assert data['colors']['domain'] == ['Fisher', 'Diver', 'Need']


def test_target_group_colliding_with_source_label():
    rows = [('Need', 'Tide'), ('Fisher', 'Tide')]

    with pytest.raises(ValueError, match="'Need' is also a source label"):
        build_sankey_data(rows, target_group='Need', target_color='#cccccc', rng=0)


def test_weighted_links_are_positive():
    df = pd.DataFrame({'role': ['A', 'B', 'C'], 'need': ['X', 'Y', 'Z'], 'n': [2, None, 0]})

    sankey = build_sankey_data(df, left='role', right='need', weight='n', rng=0)

    assert (sankey.links['value'] > 0).all()
    assert sankey.nodes['label'].tolist() == ['A', 'X']
