"""
Car market HTTP API.
"""
