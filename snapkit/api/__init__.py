"""Snapkit API layer.

Each domain package exports its operations one module per function or class.
"""
