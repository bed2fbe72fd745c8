"""
Color assignment for Sankey node and link groups

Colors are sampled from a seaborn palette and shuffled, so repeated figure
runs get a different look. Pass `rng` (a seed or numpy Generator) to make the
assignment reproducible.

Usage:
    from analysis.sankey.colors import assign_colors

    scale = assign_colors(['Fisher', 'Diver', 'Need'], fixed_color='#cccccc', rng=42)
    scale.as_dict()   # {'Fisher': '#...', 'Diver': '#...', 'Need': '#cccccc'}
"""

import json
import numpy as np
import seaborn as sns
from matplotlib.colors import to_hex, to_rgba
from typing import Dict, List, NamedTuple, Optional, Sequence, Union

RandomSource = Union[None, int, np.random.Generator]


class ColorScale(NamedTuple):
    """Ordinal color scale: domain[i] is drawn with range[i]"""
    domain: List[str]
    range: List[str]

    def as_dict(self) -> Dict[str, str]:
        return dict(zip(self.domain, self.range))

    def to_d3(self) -> str:
        """JavaScript snippet for renderers built on D3 ordinal scales"""
        return (
            f'd3.scaleOrdinal().domain({json.dumps(self.domain)})'
            f'.range({json.dumps(self.range)})'
        )


def sample_colors(n: int, palette: str = 'husl', rng: RandomSource = None) -> List[str]:
    """
    Draw n palette colors in random order

    Continuous palettes (husl, viridis...) are sampled at n evenly spaced
    points, so every color is distinct. Qualitative palettes shorter than n
    cycle and repeat colors instead of failing.

    Args:
        n: Number of colors
        palette: Any palette name seaborn understands
        rng: None (fresh randomness), an int seed, or a numpy Generator

    Returns:
        List of n hex colors
    """
    if n <= 0:
        return []
    colors = [to_hex(c) for c in sns.color_palette(palette, n_colors=n)]
    order = np.random.default_rng(rng).permutation(n)
    return [colors[i] for i in order]


def assign_colors(
    groups: Sequence[str],
    fixed_color: Optional[str] = None,
    palette: str = 'husl',
    rng: RandomSource = None
) -> ColorScale:
    """
    Assign one color per group label

    Args:
        groups: Distinct group labels; the target group, if any, comes last
        fixed_color: Color pinned to the last group; the others are sampled
        palette: Seaborn palette to sample from
        rng: Random source for the shuffle (None randomizes per call)

    Returns:
        ColorScale with the groups as domain

    Raises:
        ValueError: If a group label is repeated
    """
    groups = list(groups)
    if len(set(groups)) != len(groups):
        duplicates = sorted({g for g in groups if groups.count(g) > 1})
        raise ValueError(f'Group labels must be distinct, repeated: {duplicates}')

    if not groups:
        return ColorScale(domain=[], range=[])

    if fixed_color is not None:
        colors = sample_colors(len(groups) - 1, palette, rng) + [to_hex(fixed_color)]
    else:
        colors = sample_colors(len(groups), palette, rng)

    return ColorScale(domain=groups, range=colors)


def to_rgba_string(color: str, alpha: float = 1.0) -> str:
    """Convert any matplotlib color to a CSS rgba() string"""
    r, g, b, _ = to_rgba(color)
    return f'rgba({int(round(r * 255))}, {int(round(g * 255))}, {int(round(b * 255))}, {alpha})'
