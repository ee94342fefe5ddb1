"""
Ingestion for Review Reports.

Loads the reviews CSV into Review records:
- ReviewLoader: header-bound CSV parsing
- ReviewLoadError: raised on any load failure
"""
