#!/usr/bin/env python3
"""
Survey Schema Validation

Uses pandera to check the coded survey before any figure is drawn:
- Required category columns are present
- Category columns hold text labels (missing answers allowed)
- Optional respondent ID column is unique

Usage:
    from data_engineering.utils.validation import validate_survey_dataset

    validate_survey_dataset(df, category_columns=['role', 'need'])
"""

import pandera as pa
from pandera import Column, Check
import pandas as pd
from typing import List, Optional


# ============================================================================
# SURVEY SCHEMA
# ============================================================================

def build_survey_schema(category_columns: List[str],
                        id_column: Optional[str] = None) -> pa.DataFrameSchema:
    """
    Schema for a coded survey table

    Args:
        category_columns: Columns that must exist and hold category labels
        id_column: Respondent ID column that must be unique (optional)

    Returns:
        pandera DataFrameSchema
    """
    columns = {
        column: Column(
            str,
            Check(lambda s: s.str.strip().str.len() > 0, element_wise=False,
                  error='blank label (clean labels before validating)'),
            nullable=True,
            description='Coded category label'
        )
        for column in category_columns
    }

    if id_column is not None:
        columns[id_column] = Column(str, nullable=False, unique=True,
                                    description='Respondent ID')

    return pa.DataFrameSchema(
        columns,
        strict=False,  # Allow extra columns not defined here
        coerce=True,   # Coded numbers become labels
        description='Coded survey schema'
    )


# ============================================================================
# VALIDATION FUNCTIONS
# ============================================================================

def validate_survey_dataset(df: pd.DataFrame, category_columns: List[str],
                            name: str = 'survey', id_column: Optional[str] = None) -> bool:
    """
    Validate a coded survey table

    Args:
        df: DataFrame to validate
        category_columns: Columns used by the figures
        name: Dataset name for logging
        id_column: Respondent ID column (optional)

    Returns:
        True if validation passes

    Raises:
        ValueError: If required columns are missing
        pandera.errors.SchemaErrors: If schema validation fails
    """
    print(f'\n{"="*70}')
    print(f'Validating {name} dataset')
    print(f'{"="*70}')

    required = list(category_columns) + ([id_column] if id_column else [])
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(
            f'❌ Missing columns in {name}: {missing}\n'
            f'   Available columns: {list(df.columns)}'
        )
    print(f'  ✓ All {len(required)} required columns present')

    schema = build_survey_schema(category_columns, id_column)
    try:
        schema.validate(df, lazy=True)
        print(f'  ✓ Schema validation passed')
    except pa.errors.SchemaErrors as err:
        print(f'  ❌ Schema validation failed for {name}:')
        print(err.failure_cases)
        raise

    check_data_quality(df, category_columns)

    print(f'  ✓ All validations passed for {name}\n')
    return True


def check_data_quality(df: pd.DataFrame, category_columns: List[str]):
    """
    Report data quality issues that do not block plotting

    Checks:
    - Missing answer percentages
    - Categories with a single response (usually typos)
    """
    if len(df) == 0:
        print(f'  ⚠️  WARNING: dataset is empty')
        return

    missing_pct = (df[category_columns].isnull().sum() / len(df) * 100).sort_values(ascending=False)
    high_missing = missing_pct[missing_pct > 50]
    if len(high_missing) > 0:
        print(f'  ⚠️  High missing values (>50%):')
        for col, pct in high_missing.items():
            print(f'     - {col}: {pct:.1f}%')

    for column in category_columns:
        counts = df[column].value_counts()
        singletons = counts[counts == 1]
        if len(singletons) > 0:
            print(f'  ⚠️  {column}: {len(singletons)} category(ies) with a single response')
