"""Domain layer: entities, lifecycle, identifiers, and errors.

The domain never imports from infrastructure or services.
"""
