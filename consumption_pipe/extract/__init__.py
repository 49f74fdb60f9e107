"""
Extract Layer - Pure I/O to External APIs

This layer handles the metering API call with no business logic.
- No imports from transform or load layers
- Returns the raw parsed JSON body
- Maps network and HTTP failures to pipeline errors
"""
