"""
Figure generation scripts
"""
