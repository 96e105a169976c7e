"""
Feature modules.

- track: GPS track model, metrics, bounds, GPX parsing
- path: projection, simplification and path emission
"""
