"""Rich, structured console output for caconfig.

Usage:
    from caconfig.console import logger

    logger.info("Reading current settings...")
    logger.success("Already in desired state")
    logger.warning("Restart required")
    logger.error("No active certification authority")

    # Structured output
    logger.header("Get", "Contoso Root CA")
    logger.key_value({"CRLPeriodUnits": 1, "CRLPeriod": "Weeks"})
    logger.drift("CRLPeriodUnits", 1, 2)
"""
from caconfig.console.logger import Logger, get_logger, render_value

# Module-level singleton for convenient import
logger = get_logger()

__all__ = ["Logger", "get_logger", "logger", "render_value"]
