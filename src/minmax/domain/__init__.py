"""Domain layer — ordering operations and operand parsing.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
