"""Service layer — operations over the configured campaigns, returning ServiceResult.

Services may import from domain and config.
They must never import from commands, output, or plugins.
"""
