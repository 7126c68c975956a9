"""
Exposes the version of geomeasures
"""
__version__ = 'v0.1.0'
