"""
Label cleanup for coded survey answers

Coders type category labels by hand, so the same code shows up with stray
spaces, different casing of "N/A", and so on. These helpers normalize column
names and labels before anything is counted.

Usage:
    from data_engineering.cleaning import clean_survey, explode_multi_select

    df = clean_survey(raw_df, category_columns=['role', 'need'],
                      label_map={'fishers': 'Fisher'})
    df = explode_multi_select(df, 'need')
"""

import re
import numpy as np
import pandas as pd
from typing import Dict, List, Optional

from config.settings import MULTI_SELECT_SEP, NA_TOKENS


def to_snake_case(name) -> str:
    """'Primary Need (coded)' -> 'primary_need_coded'"""
    name = re.sub(r'[^0-9a-zA-Z]+', '_', str(name).strip())
    name = re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', name)
    return name.strip('_').lower()


def normalize_columns(df: pd.DataFrame, rename: Optional[Dict[str, str]] = None) -> pd.DataFrame:
    """
    Rename columns to snake_case, then apply explicit renames

    Args:
        df: Raw survey data
        rename: Mapping applied after snake_casing (keys are snake_case names)

    Returns:
        Copy of df with new column names
    """
    df = df.rename(columns=to_snake_case)
    if rename:
        df = df.rename(columns=rename)
    return df


def clean_labels(series: pd.Series, label_map: Optional[Dict[str, str]] = None,
                 na_tokens: List[str] = NA_TOKENS) -> pd.Series:
    """
    Normalize one column of category labels

    - Strips and collapses whitespace
    - Treats NA tokens ('', 'N/A', 'none', ...) as missing, case-insensitively
    - Applies label_map (matched after whitespace cleanup)

    Args:
        series: Category column
        label_map: Old label -> new label
        na_tokens: Lower-case strings treated as missing

    Returns:
        Cleaned series (object dtype, missing values as NaN)
    """
    na_set = {token.lower() for token in na_tokens}

    def clean(value):
        if pd.isna(value):
            return np.nan
        text = re.sub(r'\s+', ' ', str(value)).strip()
        if text.lower() in na_set:
            return np.nan
        return text

    cleaned = series.map(clean).astype(object)
    if label_map:
        cleaned = cleaned.replace(label_map)
    return cleaned


def clean_survey(df: pd.DataFrame, category_columns: List[str],
                 label_map: Optional[Dict[str, str]] = None,
                 rename: Optional[Dict[str, str]] = None) -> pd.DataFrame:
    """
    Normalize column names and clean every category column

    Args:
        df: Raw survey data
        category_columns: Columns holding coded answers (post-rename names)
        label_map: Relabeling applied to every category column
        rename: Explicit column renames (after snake_casing)

    Returns:
        Cleaned copy of the survey

    Raises:
        ValueError: If a category column is missing
    """
    df = normalize_columns(df, rename)

    missing = [c for c in category_columns if c not in df.columns]
    if missing:
        raise ValueError(
            f'Category columns not found: {missing}\n'
            f'   Available columns: {list(df.columns)}'
        )

    for column in category_columns:
        before = df[column].notna().sum()
        df[column] = clean_labels(df[column], label_map)
        dropped = before - df[column].notna().sum()
        if dropped:
            print(f'  ⚠️  {column}: {dropped} answer(s) treated as missing')

    return df


def explode_multi_select(df: pd.DataFrame, column: str, sep: str = MULTI_SELECT_SEP) -> pd.DataFrame:
    """
    One row per coded answer for multi-select questions

    'Tide; Wave' becomes two rows ('Tide' and 'Wave') with the other columns
    repeated. Empty pieces are dropped; missing answers stay as one NaN row.

    Returns:
        Exploded copy with a fresh index
    """
    df = df.copy()

    def split(value):
        if pd.isna(value):
            return [np.nan]
        parts = [p.strip() for p in str(value).split(sep)]
        parts = [p for p in parts if p]
        return parts or [np.nan]

    df[column] = df[column].map(split)
    return df.explode(column, ignore_index=True)


def disambiguate_labels(df: pd.DataFrame, left: str, right: str,
                        suffix: str = ' ') -> pd.DataFrame:
    """
    Rename target labels that also occur as source labels

    Needed before building a Sankey with merge_shared_labels=True, where a
    shared label (typically 'Other') would otherwise collapse into one node.
    The default suffix is a single space, which keeps the rendered label
    identical while making the two labels distinct.

    Args:
        df: Survey data
        left: Source column
        right: Target column
        suffix: Appended to colliding target labels

    Returns:
        Copy of df with colliding labels in `right` renamed
    """
    df = df.copy()
    shared = set(df[left].dropna().astype(str)) & set(df[right].dropna().astype(str))
    if shared:
        print(f'  ⚠️  Renaming {len(shared)} shared label(s) in {right}: {", ".join(sorted(shared))}')
        df[right] = df[right].map(
            lambda v: f'{v}{suffix}' if not pd.isna(v) and str(v) in shared else v
        )
    return df
