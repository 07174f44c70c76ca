"""
Operator mixins of `MDArray` backed by dtype-specific control paths.
"""
