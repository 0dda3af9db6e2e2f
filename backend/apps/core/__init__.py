"""
Core app - request context, authorization gate, results and logging.
"""
