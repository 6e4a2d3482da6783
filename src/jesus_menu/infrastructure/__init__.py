"""Infrastructure layer — system clock and browser launching.

This layer depends only on stdlib.
It must never import from domain, services, commands, or output.
The service layer bridges between domain rules and infrastructure.
"""
