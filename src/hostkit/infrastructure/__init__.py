"""Infrastructure layer — filesystem probing and directory creation.

This layer depends only on stdlib.
It must never import from domain, services, commands, or output.
The service layer bridges between domain models and infrastructure.
"""
