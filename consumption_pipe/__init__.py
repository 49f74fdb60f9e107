"""
pipe-octopus-consumption-to-parquet

Fetch smart-meter consumption readings from the Octopus Energy REST API
and archive them as a Snappy-compressed Parquet file.
"""

__version__ = "0.1.0"
