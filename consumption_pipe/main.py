"""
Main Entry Point

Fetches consumption readings for the configured meter and window and
archives them to a Parquet file. Exits 0 on success, 1 on any pipeline
failure.
"""

import argparse
import logging
import sys
from typing import List, Optional

from consumption_pipe.coreutils.env import (
    DEFAULT_LOG_DIR,
    config_path,
    env_get,
    output_path,
)
from consumption_pipe.coreutils.logging import setup_logging
from consumption_pipe.exceptions import PipelineError
from consumption_pipe.load.local_storage import get_file_info
from consumption_pipe.orchestration.pipeline import run_pipeline

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description="Archive smart-meter consumption readings to Parquet"
    )
    parser.add_argument(
        "--config",
        default=config_path(),
        help="JSON config file with API parameters (default: %(default)s)",
    )
    parser.add_argument(
        "--output",
        default=output_path(),
        help="Parquet file to write (default: %(default)s)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    setup_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_dir=env_get("LOG_DIR", DEFAULT_LOG_DIR),
    )

    try:
        results = run_pipeline(config_path=args.config, output_path=args.output)
    except PipelineError as e:
        logger.error(f"❌ {type(e).__name__}: {e}")
        return 1

    info = get_file_info(results["path"])
    logger.info(
        f"📊 {info['file_path']}: {info['rows']} rows, {info['columns']} columns, "
        f"{info['file_size_mb']} MB"
    )

    print(f"✅ Data successfully written to {results['path']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
