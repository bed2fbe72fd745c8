import matplotlib.pyplot as plt
import pandas as pd
import pytest

from analysis.sankey import build_sankey_data
from analysis.visualization import (
    count_categories,
    create_sankey_figure,
    mosaic_table,
    plot_category_counts,
    plot_grouped_counts,
    plot_mosaic,
    save_figure,
)


@pytest.fixture
def scenario_sankey(scenario_rows):
    return build_sankey_data(scenario_rows, target_group='Need', target_color='#cccccc', rng=0)


def test_sankey_figure_uses_node_tables(scenario_sankey):
    fig = create_sankey_figure(scenario_sankey, title='Role → Need')

    trace = fig.data[0]
    assert list(trace.node.label) == ['Fisher', 'Diver', 'Tide', 'Wave']
    assert list(trace.link.source) == [0, 1]
    assert list(trace.link.target) == [2, 3]
    assert list(trace.link.value) == [2, 1]


def test_sankey_colors_follow_groups(scenario_sankey):
    fig = create_sankey_figure(scenario_sankey, link_alpha=0.5)

    trace = fig.data[0]
    colors = scenario_sankey.colors.as_dict()
    assert list(trace.node.color) == [colors['Fisher'], colors['Diver'], '#cccccc', '#cccccc']
    assert all(c.startswith('rgba(') and c.endswith(', 0.5)') for c in trace.link.color)


def test_empty_sankey_figure(scenario_rows):
    sankey = build_sankey_data(scenario_rows, min_weight=10)

    fig = create_sankey_figure(sankey)

    assert len(fig.data[0].node.label) == 0


def test_save_figure_html(tmp_path, scenario_sankey):
    path = save_figure(create_sankey_figure(scenario_sankey), tmp_path / 'out' / 'sankey.html')

    assert path.exists()
    assert 'Fisher' in path.read_text()


def test_save_figure_rejects_unknown_format(tmp_path, scenario_sankey):
    with pytest.raises(ValueError, match='Unsupported figure format'):
        save_figure(create_sankey_figure(scenario_sankey), tmp_path / 'sankey.txt')


def test_count_categories(survey_df):
    table = count_categories(survey_df, 'role', normalize=True)

    assert table['category'].tolist()[0] == 'Fisher'
    assert table['count'].tolist() == [4, 2, 1]
    assert table['percent'].sum() == pytest.approx(100, abs=0.2)


def test_count_categories_top_n(survey_df):
    table = count_categories(survey_df, 'need', top_n=1)

    assert table.values.tolist() == [['Tide data', 4]]


def test_plot_category_counts(survey_df):
    fig = plot_category_counts(survey_df, 'role')

    ax = fig.axes[0]
    assert len(ax.patches) == 3
    assert [t.get_text() for t in ax.get_yticklabels()] == ['Fisher', 'Diver', 'Researcher']
    plt.close(fig)


def test_plot_category_counts_empty():
    fig = plot_category_counts(pd.DataFrame({'role': [None, None]}), 'role')

    assert fig.axes[0].texts[0].get_text() == 'No responses'
    plt.close(fig)


def test_plot_grouped_counts(survey_df):
    fig = plot_grouped_counts(survey_df, 'need', hue='role')

    assert fig.axes[0].get_title() == 'need by role'
    plt.close(fig)


def test_mosaic_table_shares(survey_df):
    tiles = mosaic_table(survey_df, 'role', 'need')

    x_shares = tiles.drop_duplicates('x').set_index('x')['x_share']
    assert x_shares.sum() == pytest.approx(1.0)
    assert x_shares['Fisher'] == pytest.approx(3 / 6)
    for _, column in tiles.groupby('x'):
        assert column['y_share'].sum() == pytest.approx(1.0)
    assert tiles['count'].sum() == 6


def test_plot_mosaic(survey_df):
    fig = plot_mosaic(survey_df, 'role', 'need')

    ax = fig.axes[0]
    # One tile per non-empty (role, need) combination
    assert len(ax.patches) == 5
    assert [t.get_text() for t in ax.get_xticklabels()] == ['Fisher', 'Diver', 'Researcher']
    plt.close(fig)


def test_plot_mosaic_empty():
    fig = plot_mosaic(pd.DataFrame({'role': [None], 'need': ['Tide']}), 'role', 'need')

    assert fig.axes[0].texts[0].get_text() == 'No responses'
    plt.close(fig)
