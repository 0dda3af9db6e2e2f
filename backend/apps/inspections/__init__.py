"""
Inspections app - vehicle inspection reports and CSV export.
"""
