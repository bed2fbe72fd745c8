import json

import numpy as np
import pytest

from analysis.sankey.colors import ColorScale, assign_colors, sample_colors, to_rgba_string


GROUPS = ['Fisher', 'Diver', 'Guide', 'Researcher', 'Need']


def test_one_distinct_color_per_group():
    scale = assign_colors(GROUPS, rng=0)

    assert scale.domain == GROUPS
    assert len(scale.range) == len(GROUPS)
    assert len(set(scale.range)) == len(GROUPS)
    assert all(c.startswith('#') and len(c) == 7 for c in scale.range)


def test_fixed_color_pinned_to_last_group():
    scale = assign_colors(GROUPS, fixed_color='#cccccc', rng=0)

    assert scale.as_dict()['Need'] == '#cccccc'
    assert len(set(scale.range[:-1])) == len(GROUPS) - 1


def test_seeded_assignment_is_reproducible():
    assert assign_colors(GROUPS, rng=7) == assign_colors(GROUPS, rng=7)


def test_generator_is_accepted():
    scale = assign_colors(GROUPS, rng=np.random.default_rng(1))

    assert len(scale.range) == len(GROUPS)


def test_colors_are_a_permutation_of_the_palette():
    first = assign_colors(GROUPS, rng=1)
    second = assign_colors(GROUPS, rng=2)

    assert sorted(first.range) == sorted(second.range)


def test_many_groups_stay_distinct():
    groups = [f'group {i}' for i in range(40)]

    scale = assign_colors(groups, rng=0)

    assert len(set(scale.range)) == 40


def test_short_qualitative_palette_does_not_fail():
    colors = sample_colors(25, palette='Set2', rng=0)

    assert len(colors) == 25


def test_duplicate_groups_rejected():
    with pytest.raises(ValueError, match='distinct'):
        assign_colors(['Fisher', 'Need', 'Fisher'])


def test_empty_groups():
    assert assign_colors([]) == ColorScale(domain=[], range=[])
    assert assign_colors([], fixed_color='#cccccc') == ColorScale(domain=[], range=[])


def test_single_group_with_fixed_color():
    scale = assign_colors(['Need'], fixed_color='gray')

    assert scale.range == ['#808080']


def test_to_d3_snippet():
    scale = ColorScale(domain=['Fisher', 'Need'], range=['#ff0000', '#cccccc'])

    snippet = scale.to_d3()

    assert snippet.startswith('d3.scaleOrdinal()')
    assert json.dumps(['Fisher', 'Need']) in snippet
    assert json.dumps(['#ff0000', '#cccccc']) in snippet


def test_to_rgba_string():
    assert to_rgba_string('#ff0000', 0.4) == 'rgba(255, 0, 0, 0.4)'
