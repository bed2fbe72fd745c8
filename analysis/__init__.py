"""
Analysis Module

Turns the coded survey into figures

Modules:
- sankey: Node/link tables and color scales for Sankey diagrams
- visualization: Bar chart, mosaic and Sankey plotting
- reports: Command-line figure generation
"""

__version__ = "1.0.0"
