"""Service layer: tenant services and their instrumentation.

Services may import from domain and infrastructure layers.
They must never import from commands, output, or config.
"""
