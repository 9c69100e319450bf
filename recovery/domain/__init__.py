"""Domain layer: entities, protocols (ports), errors and validators.

Nothing in this package imports from infrastructure or presentation.
"""
