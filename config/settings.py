"""
Chart settings for the workshop survey figures
Colors, constants, and defaults shared by the analysis modules
"""

# Sankey defaults
DEFAULT_TARGET_GROUP = 'Target'     # Shared color group for every target node
DEFAULT_PALETTE = 'husl'            # Evenly spaced hues, supports any number of colors
DEFAULT_TARGET_COLOR = '#bdc3c7'    # Light gray, used when --target-color is given without value
LINK_ALPHA = 0.4

SANKEY_LAYOUT = {
    'node_pad': 15,
    'node_thickness': 20,
    'height': 600,
    'font_size': 12,
}

# Labels treated as missing when cleaning coded answers
NA_TOKENS = [
    '',
    'na',
    'n/a',
    'nan',
    'none',
    'null',
    '-',
    '--',
]

# Separator used by the survey export for multi-select answers
MULTI_SELECT_SEP = ';'

# Plotly Chart Theme
PLOTLY_THEME = 'plotly_white'

# Matplotlib / seaborn styling
SEABORN_STYLE = 'whitegrid'
BAR_PALETTE = 'viridis'
MOSAIC_PALETTE = 'Set2'
FIGURE_SIZE = (12, 6)
FIGURE_DPI = 300

# Supported export formats
INTERACTIVE_FORMATS = ['html']
STATIC_FORMATS = ['png', 'svg', 'pdf']
