"""
Load Layer - Data Persistence

This layer handles local Parquet storage.
- No business logic, just I/O operations
"""
