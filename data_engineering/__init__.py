"""
Data Engineering Module for the Workshop Survey Analysis

This module prepares the coded survey export for charting:
1. loading.py - Read the spreadsheet/CSV export
2. cleaning.py - Column names, label cleanup, multi-select answers
3. utils/validation.py - Schema checks before plotting

Usage:
    from data_engineering.loading import load_survey
    from data_engineering.cleaning import clean_survey
"""

__version__ = "1.0.0"
