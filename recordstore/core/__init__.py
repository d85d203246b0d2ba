"""
Core infrastructure: settings, logging, error types and backend client lifecycle.
"""
