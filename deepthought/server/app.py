"""
FastAPI Application Entry Point for Deep Thought.

This module creates and configures the FastAPI application with:
- Configuration and logging
- Starting-hand statistics, loaded once and shared by every table
- HTTP routes for table events and action requests
"""

from typing import Optional
import logging

from fastapi import FastAPI

from deepthought import __version__
from deepthought.config import BotConfig, load_config
from deepthought.server.routes import router
from deepthought.server.sessions import TableRegistry
from deepthought.strategy.statistics import StartingHandStatistics

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def create_app(
    config: Optional[BotConfig] = None,
    statistics: Optional[StartingHandStatistics] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Settings; read from the environment when omitted
        statistics: Preloaded statistics; loaded from config.stats_dir when
            omitted

    Returns:
        Configured FastAPI application instance

    Raises:
        StatisticsError: If the statistics cannot be loaded.
    """
    config = config or load_config()
    configure_logging(config.log_level)

    if statistics is None:
        statistics = StartingHandStatistics.load(
            config.stats_dir, missing_probability=config.missing_probability
        )

    app = FastAPI(
        title="Deep Thought",
        description="Rule-based Texas Hold'em agent",
        version=__version__,
    )
    app.state.registry = TableRegistry(config, statistics)
    app.include_router(router)

    @app.on_event("startup")
    async def startup_event():
        logger.info(f"{config.name} ready, statistics for {list(statistics.table_sizes)} players")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info(f"{config.name} shutting down...")

    return app


def main():
    """Run the server (for use as entry point)."""
    import uvicorn

    config = load_config()
    uvicorn.run(
        "deepthought.server.app:create_app",
        factory=True,
        host=config.host,
        port=config.port,
    )


if __name__ == "__main__":
    main()
