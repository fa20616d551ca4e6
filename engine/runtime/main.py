"""
Pipeline Editor - Main Entry Point

Configures logging and serves the editor API with uvicorn.
"""

import logging
import os

import uvicorn

from engine.config.loader import EditorConfig

logger = logging.getLogger(__name__)


def setup_logging(config: EditorConfig) -> None:
    """Configure root logging from the editor config"""
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main():
    """
    Main entry point for the editor API.

    Environment Variables:
        HOST: Bind address (default: "0.0.0.0")
        PORT: Bind port (default: 8000)
        EDITOR_CONFIG_DIR: Config directory path (default: "config")
        LOG_LEVEL: Log level override
    """
    config = EditorConfig.from_env()
    setup_logging(config)

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))

    logger.info("=" * 60)
    logger.info("Pipeline Editor Starting")
    logger.info("=" * 60)
    logger.info(f"Listening on {host}:{port}")
    logger.info(
        f"Layout grid: {config.layout.columns} columns, "
        f"{config.layout.spacing_x}x{config.layout.spacing_y} spacing"
    )

    uvicorn.run(
        "dataflow.api.main:app",
        host=host,
        port=port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
