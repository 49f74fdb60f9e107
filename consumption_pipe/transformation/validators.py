"""
Data Validators - Transform Layer

Data-quality report on the extracted table. Reports only: the table is
written as fetched whatever the report says.
"""

import polars as pl
from typing import Dict, Any
import logging

logger = logging.getLogger(__name__)

TIMESTAMP_COLUMN = "interval_start"


def validate_data_quality(
    df: pl.DataFrame, timestamp_column: str = TIMESTAMP_COLUMN
) -> Dict[str, Any]:
    """
    Validate data quality and return quality metrics

    Args:
        df: Extracted consumption DataFrame
        timestamp_column: Column checked for duplicate readings, if present

    Returns:
        Dict: Quality metrics
    """
    logger.info("Validating data quality for consumption readings")

    quality_metrics = {
        "total_records": df.height,
        "null_counts": {},
        "duplicate_counts": {},
        "data_types": df.schema,
    }

    # Check for null values in all columns
    for column in df.columns:
        quality_metrics["null_counts"][column] = df[column].null_count()

    # Check for duplicate readings
    if timestamp_column in df.columns:
        duplicate_count = df.height - df[timestamp_column].n_unique()
        quality_metrics["duplicate_counts"][timestamp_column] = duplicate_count

    # Log quality issues
    for column, null_count in quality_metrics["null_counts"].items():
        if null_count > 0:
            logger.warning(f"Column '{column}' has {null_count} null values")

    for key, duplicate_count in quality_metrics["duplicate_counts"].items():
        if duplicate_count > 0:
            logger.warning(f"Duplicate records found for '{key}': {duplicate_count}")

    logger.info(f"Data quality validation completed: {df.height} records")
    return quality_metrics
