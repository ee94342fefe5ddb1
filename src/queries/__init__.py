"""
Query layer for Review Reports.

Pure functions over a loaded list of reviews:
- Price range filter
- Count by product ID
- Keyword title search
- Category filters with transform and sorted projection
"""
