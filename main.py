"""Main entry point for the CWC water data service."""

import asyncio
import sys

from loguru import logger


async def _fetch():
    from cwc_water.client import WaterDataLoader

    loader = WaterDataLoader()
    try:
        state = await loader.load()
    finally:
        await loader.close()

    source = "fallback sample" if state.error else "live"
    print(f"Data source: {source}")
    if state.error:
        print(f"Warning: {state.error}")
    print(f"Reservoirs: {len(state.reservoirs)} | Discharges: {len(state.discharges)} | "
          f"Rainfall: {len(state.rainfall)} | Alerts: {len(state.alerts)} | Projects: {len(state.projects)}")
    for point in loader.trendline:
        print(f"  {point['name']}: {point['value']}% live storage")


def main():
    """Run the application."""
    if len(sys.argv) < 2:
        print("Usage: python main.py [api|seed|fetch]")
        sys.exit(1)

    from cwc_water.utils.logger import setup_logging
    setup_logging()

    cmd = sys.argv[1]

    if cmd == "api":
        import uvicorn
        from cwc_water.utils.config import settings
        logger.info("Starting API server...")
        uvicorn.run(
            "cwc_water.api.main:create_app",
            factory=True,
            host=settings.api.host,
            port=settings.api.port,
            reload=settings.api.reload,
        )

    elif cmd == "seed":
        from cwc_water.store.seed import run_seed
        try:
            result = asyncio.run(run_seed())
        except Exception as e:
            logger.error(f"Failed to seed MongoDB: {e}")
            sys.exit(1)
        print(f"Seeded: {result}")

    elif cmd == "fetch":
        asyncio.run(_fetch())

    else:
        print(f"Unknown command: {cmd}")
        sys.exit(1)


if __name__ == "__main__":
    main()
