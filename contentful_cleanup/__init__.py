"""
Contentful Cleanup

Command-line helpers for finding and reporting on Contentful assets:
- dump every asset in a space/environment to JSON
- report how many entries link to each asset (CSV)
- list orphaned assets that no entry links to (CSV)
"""

__version__ = "0.1.0"
