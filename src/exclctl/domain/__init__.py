"""Domain layer — exclusion rules, intervals, and calendar primitives.

This layer depends only on stdlib.
It must never import from services, config, output, or commands.
"""
