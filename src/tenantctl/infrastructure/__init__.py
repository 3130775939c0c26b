"""Infrastructure layer: key/value storage.

This layer depends on stdlib only.
It must never import from domain, services, commands, or output.
The service layer bridges between domain models and infrastructure.
"""
