"""
Configuration Module

- paths: data and output directories
- settings: chart constants and defaults
"""
