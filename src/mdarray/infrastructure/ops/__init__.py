"""
Vectorized element backends consumed by the MDArray operator layer.
"""
