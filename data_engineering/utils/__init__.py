"""
Shared data engineering helpers
"""
