"""
Core modules for the Vitals Insights app: score result models, status
classification, the sleep and recovery insight engines and batch processing.
"""
