"""Domain layer — pure matching and discount logic.

Domain modules never import from services, plugins, commands, or output.
"""
