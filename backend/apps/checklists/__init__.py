"""
Checklists app - per-organization inspection checklist and its editing operations.
"""
