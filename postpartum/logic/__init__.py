"""Core business logic layer.

Subpackages:
- program: seed derivation, phase classification, program day resolution
- planning: single-slot plan cache, daily plan fetcher, period aggregation
- shopping: building and editing the shopping checklist
- recipes: recipe details for a dish

session.ProgramSession composes them into the application root.
"""
__all__ = ["program", "planning", "shopping", "recipes", "session"]
