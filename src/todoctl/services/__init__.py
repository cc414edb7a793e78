"""Service layer: the use cases.

Services may import from domain and infrastructure layers.
Repository errors propagate to the caller unchanged.
"""
