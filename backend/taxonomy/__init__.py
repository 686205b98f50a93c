"""
Hierarchical category management backend.
"""
