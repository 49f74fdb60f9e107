"""
Data Transformers - Transform Layer

Turns the raw API body into a polars DataFrame. No explicit schema is
declared: polars infers column names and types from the first
SCHEMA_INFERENCE_ROWS records, so a field or type that only shows up later
fails the parse instead of being silently widened.
"""

import io
import json
import polars as pl
from typing import Any
import logging

from consumption_pipe.exceptions import ExtractionError, SchemaError

logger = logging.getLogger(__name__)

RESULTS_FIELD = "results"
SCHEMA_INFERENCE_ROWS = 100


def extract_table(
    response: Any,
    field_name: str = RESULTS_FIELD,
    infer_schema_length: int = SCHEMA_INFERENCE_ROWS,
) -> pl.DataFrame:
    """
    Build a DataFrame from the record list stored under field_name

    Args:
        response: Parsed JSON body from the API
        field_name: Key holding the list of records
        infer_schema_length: Number of leading records used for schema inference

    Returns:
        pl.DataFrame: One row per record

    Raises:
        ExtractionError: Field missing, not a list, or not re-serializable
        SchemaError: Records do not parse against the inferred schema
    """
    logger.info(f"Extracting '{field_name}' into a table")

    if not isinstance(response, dict):
        raise ExtractionError(
            f"Expected a JSON object response, got {type(response).__name__}"
        )
    if field_name not in response:
        raise ExtractionError(
            f"Field '{field_name}' not found in response (keys: {list(response)[:10]})"
        )

    records = response[field_name]
    if not isinstance(records, list):
        raise ExtractionError(
            f"Field '{field_name}' must hold a list of records, got {type(records).__name__}"
        )

    if not records:
        logger.warning(f"⚠️ Field '{field_name}' is empty, returning an empty table")
        return pl.DataFrame()

    try:
        payload = json.dumps(records, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise ExtractionError(f"Could not re-serialize '{field_name}': {e}") from e

    try:
        df = pl.read_json(
            io.BytesIO(payload.encode("utf-8")),
            infer_schema_length=infer_schema_length,
        )
    except pl.exceptions.PolarsError as e:
        logger.error(f"❌ Schema inference failed for '{field_name}': {e}")
        raise SchemaError(
            f"Records in '{field_name}' do not match the schema inferred from "
            f"the first {infer_schema_length}: {e}"
        ) from e

    logger.info(f"Extracted {df.height} records with columns {df.columns}")
    return df
