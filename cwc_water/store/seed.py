"""Database seeding with synthetic water datasets."""

import asyncio
from datetime import date
from typing import Optional

from loguru import logger

from cwc_water.generation.builders import build_datasets
from cwc_water.generation.sampler import build_date_window, today_utc
from cwc_water.store.collections import tag_filter
from cwc_water.store.connection import MongoConnection
from cwc_water.store.models import Dataset
from cwc_water.utils.config import Settings, settings as default_settings


async def seed_dataset(db, dataset: Dataset, source_tag: str) -> dict:
    """Replace every ``source_tag`` document in one collection."""
    collection = db[dataset.collection]

    removed = await collection.delete_many(tag_filter(source_tag))
    if removed.deleted_count:
        logger.info(f"Cleared {removed.deleted_count} prior '{source_tag}' docs from {dataset.collection}")

    inserted = 0
    documents = dataset.to_documents()
    if documents:
        result = await collection.insert_many(documents)
        inserted = len(result.inserted_ids)
        logger.info(f"Inserted {inserted} docs into {dataset.collection} ({dataset.label})")

    return {"deleted": removed.deleted_count, "inserted": inserted}


async def seed_database(db, source_tag: str, days: int = 10, today: Optional[date] = None) -> dict:
    """Full database seeding.

    Collections are processed in order and the first failure aborts the run,
    leaving earlier collections already replaced.
    """
    today = today or today_utc()
    dates = build_date_window(days, today)
    datasets = build_datasets(dates, tag=source_tag, today=today)

    logger.info("=" * 50)
    logger.info(f"SEEDING '{source_tag}' ({days} day window)")
    logger.info("=" * 50)

    summary = {}
    for dataset in datasets:
        summary[dataset.collection] = await seed_dataset(db, dataset, source_tag)

    total = sum(s["inserted"] for s in summary.values())
    logger.info(f"Done: {total} docs across {len(summary)} collections")
    return summary


async def run_seed(config: Settings = None, connection: MongoConnection = None) -> dict:
    """Seed the configured database, always closing the connection."""
    config = config or default_settings
    connection = connection or MongoConnection.from_config(config.mongo)
    logger.info(f"Seeding synthetic water datasets into '{connection.database_name}'...")
    try:
        db = await connection.database()
        return await seed_database(db, config.mongo.source_tag, days=config.seed.days_of_history)
    finally:
        await connection.close()


if __name__ == "__main__":
    from cwc_water.utils.logger import setup_logging

    setup_logging()
    asyncio.run(run_seed())
