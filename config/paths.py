"""
Project Path Configuration

Centralized path definitions for survey data and generated figures
"""

from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent

# ==============================================================================
# DATA
# ==============================================================================

DATA_ROOT = PROJECT_ROOT / "data"

# Raw Layer: spreadsheets exactly as exported, never edited by hand
RAW = DATA_ROOT / "raw"

DEFAULT_SURVEY_FILE = RAW / "workshop_survey_coded.xlsx"

# ==============================================================================
# OUTPUTS
# ==============================================================================

# Figures are written to FIGURES/bar_charts, FIGURES/mosaic and FIGURES/sankey
OUTPUTS_ROOT = PROJECT_ROOT / "outputs"
FIGURES = OUTPUTS_ROOT / "figures"
