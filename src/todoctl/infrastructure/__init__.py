"""Infrastructure layer: repositories and the Tracker store handle.

Infrastructure may import from domain, never from services.
"""
