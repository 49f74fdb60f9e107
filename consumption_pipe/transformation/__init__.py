"""
Transformation Layer - Pure, Deterministic Functions

This layer turns the raw API body into a table.
- Pure functions (input -> output)
- No I/O operations
- Unit testable
"""
