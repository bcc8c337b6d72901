"""
Core infrastructure: database sessions, row store access, validation and errors.
"""
