"""
Catalog domain module.

Categories and tags used to organize learning items.
"""
