"""
Bundled sample data.
"""
