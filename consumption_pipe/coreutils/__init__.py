"""
Core Utilities - config loading, environment, logging and HTTP session helpers
"""
