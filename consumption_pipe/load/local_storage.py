"""
Local Storage - Load Layer

Pure functions for local Parquet storage.
The output file is replaced on every run; there is no append or merge.
"""

import polars as pl
import os
from pathlib import Path
from typing import Any, Dict, Union
import logging

from consumption_pipe.exceptions import IoError

logger = logging.getLogger(__name__)

PARQUET_COMPRESSION = "snappy"


def save_parquet(
    df: pl.DataFrame,
    filepath: Union[str, Path],
    compression: str = PARQUET_COMPRESSION,
) -> str:
    """
    Save DataFrame to Parquet file, replacing any existing file

    The file is flushed and synced before returning. A failure partway
    through can leave a truncated file behind.

    Args:
        df: DataFrame to save
        filepath: Path to save file
        compression: Parquet block compression codec

    Returns:
        str: Path to saved file

    Raises:
        IoError: File could not be created or written
    """
    filepath = str(filepath)
    logger.info(f"Saving DataFrame to Parquet: {filepath}")

    try:
        # Ensure directory exists
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(filepath, "wb") as f:
            df.write_parquet(f, compression=compression)
            f.flush()
            os.fsync(f.fileno())

    except (OSError, pl.exceptions.PolarsError) as e:
        logger.error(f"❌ Failed to write Parquet file {filepath}: {e}")
        raise IoError(f"Failed to write Parquet file {filepath}: {e}") from e

    logger.info(f"Saved {df.height} records to {filepath}")
    return filepath


def load_parquet(filepath: Union[str, Path]) -> pl.DataFrame:
    """
    Load DataFrame from Parquet file

    Args:
        filepath: Path to Parquet file

    Returns:
        pl.DataFrame: Loaded DataFrame
    """
    logger.info(f"Loading DataFrame from Parquet: {filepath}")

    if not os.path.exists(filepath):
        raise IoError(f"Parquet file not found: {filepath}")

    try:
        df = pl.read_parquet(filepath)
    except (OSError, pl.exceptions.PolarsError) as e:
        raise IoError(f"Failed to read Parquet file {filepath}: {e}") from e

    logger.info(f"Loaded {df.height} records from {filepath}")
    return df


def get_file_info(filepath: Union[str, Path]) -> Dict[str, Any]:
    """
    Get information about a written Parquet file

    Args:
        filepath: Path to Parquet file

    Returns:
        Dictionary with file information
    """
    df = load_parquet(filepath)
    file_size_mb = os.path.getsize(filepath) / (1024 * 1024)

    return {
        "file_path": str(filepath),
        "file_size_mb": round(file_size_mb, 2),
        "rows": df.height,
        "columns": df.width,
        "schema": df.schema,
        "column_names": df.columns,
    }
