"""Service layer: operations returning ServiceResult.

Services may import from domain, infrastructure, and output.
They must never import from commands.
"""
