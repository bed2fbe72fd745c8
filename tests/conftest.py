import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')

import pandas as pd
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def scenario_rows():
    return [('Fisher', 'Tide'), ('Fisher', 'Tide'), ('Diver', 'Wave')]


@pytest.fixture
def survey_df():
    return pd.DataFrame({
        'respondent_id': ['r1', 'r2', 'r3', 'r4', 'r5', 'r6', 'r7', 'r8'],
        'role': ['Fisher', 'Fisher', 'Diver', 'Fisher', 'Researcher', 'Diver', None, 'Fisher'],
        'need': ['Tide data', 'Tide data', 'Wave data', 'Other', 'Tide data', 'Tide data', 'Other', None],
    })
