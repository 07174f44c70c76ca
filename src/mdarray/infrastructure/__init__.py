"""
Infrastructure layer: index engine, concrete container and CPU backend.
"""
