"""Infrastructure layer: operating-system collaborators.

This layer depends on stdlib and third-party libs (click).
It must never import from domain, services, commands, or output.
"""
