"""
Pipeline Orchestrator - Fetch, Transform, Write

One linear pass per run:
1. Load the request descriptor from the JSON config file
2. Fetch consumption readings (single GET)
3. Extract the "results" records into a DataFrame
4. Report data quality
5. Write the DataFrame to Parquet, replacing the previous file

Any failure aborts the run. The output file is only opened once the
table has been built, so config, network and parsing failures leave it
untouched.
"""

from typing import Any, Dict, Optional
import logging

import requests

from consumption_pipe.coreutils.config import load_request_config
from consumption_pipe.coreutils.env import DEFAULT_CONFIG_PATH, DEFAULT_OUTPUT_PATH

# Extract layer imports
from consumption_pipe.extract.octopus_api import OctopusAPIClient

# Transform layer imports
from consumption_pipe.transformation.transformers import RESULTS_FIELD, extract_table
from consumption_pipe.transformation.validators import validate_data_quality

# Load layer imports
from consumption_pipe.load.local_storage import save_parquet

logger = logging.getLogger(__name__)


class ConsumptionPipeline:
    """Orchestrates the consumption archive pipeline"""

    def __init__(
        self,
        config_path: str = DEFAULT_CONFIG_PATH,
        output_path: str = DEFAULT_OUTPUT_PATH,
        field_name: str = RESULTS_FIELD,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the pipeline

        Args:
            config_path: JSON config file with API parameters
            output_path: Parquet file to (over)write
            field_name: Response key holding the records
            session: Optional HTTP session (a fresh one is created otherwise)
        """
        self.config_path = config_path
        self.output_path = output_path
        self.field_name = field_name
        self.session = session

    def run(self) -> Dict[str, Any]:
        """
        Run the pipeline once

        Returns:
            dict: Output path, row count and column names
        """
        logger.info("🚀 Starting consumption pipeline")

        try:
            logger.info("🔄 Step 1: Loading API config...")
            descriptor = load_request_config(self.config_path)

            logger.info("🔄 Step 2: Fetching consumption data...")
            with OctopusAPIClient(session=self.session) as client:
                response = client.get_consumption(descriptor)

            logger.info("🔄 Step 3: Extracting table...")
            df = extract_table(response, self.field_name)
            validate_data_quality(df)

            logger.info("🔄 Step 4: Writing Parquet...")
            path = save_parquet(df, self.output_path)

        except Exception as e:
            logger.error(f"❌ Pipeline failed: {e}")
            raise

        logger.info(f"✅ Pipeline completed: {df.height} records written to {path}")
        return {"path": path, "rows": df.height, "columns": df.columns}


def run_pipeline(
    config_path: str = DEFAULT_CONFIG_PATH,
    output_path: str = DEFAULT_OUTPUT_PATH,
    field_name: str = RESULTS_FIELD,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """Convenience function to run the pipeline once"""
    return ConsumptionPipeline(
        config_path=config_path,
        output_path=output_path,
        field_name=field_name,
        session=session,
    ).run()
