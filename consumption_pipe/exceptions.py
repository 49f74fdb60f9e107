"""
Pipeline Errors

Every failure aborts the run. Layers wrap library exceptions
(requests, polars, pydantic, OS) into one of these at their boundary.
"""

from typing import Optional


class PipelineError(Exception):
    """Base class for all pipeline failures"""


class ConfigError(PipelineError):
    """Config file could not be turned into a request descriptor"""


class ConfigFileError(ConfigError):
    """Config file missing, unreadable or not a JSON object"""


class ConfigValueError(ConfigError):
    """Required key missing, wrong-typed or invalid"""


class TransportError(PipelineError):
    """Network-level failure before any HTTP response was received"""


class ApiError(PipelineError):
    """API answered with a non-success status or an unusable body"""

    def __init__(self, message: str, status_code: int = 0, body: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class ExtractionError(PipelineError):
    """Named field missing from the response or not re-serializable"""


class SchemaError(PipelineError):
    """Records could not be parsed against the inferred schema"""


class IoError(PipelineError):
    """Output file could not be created, written or read back"""
