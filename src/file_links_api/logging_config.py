"""Logging setup shared by the HTTP app, the Lambda handler and the CLI."""
import logging


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.

    Safe to call more than once; Lambda reuses the process between invocations
    and ``basicConfig`` is a no-op once handlers exist.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logging.getLogger().setLevel(numeric_level)
    # Silence noisy libraries
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
