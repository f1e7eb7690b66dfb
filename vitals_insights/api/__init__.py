"""
HTTP interface for the insight engines.
"""
