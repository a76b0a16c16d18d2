"""
Feature modules.

- gpx: track parsing, route statistics, bounds
- races: cross-entry aggregate statistics
"""
