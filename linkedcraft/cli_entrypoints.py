#!/usr/bin/env python3
"""Console-script wrappers for LinkedCraft.

After an editable install (``pip install -e .``) the following commands become
available system-wide:

* ``linkedcraft-serve``   – run the HTTP API with uvicorn
* ``linkedcraft-trends``  – run the trend pipeline once and print the result
  (``--csv PATH`` also exports the topics as a spreadsheet)
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd
import uvicorn

from trend_engine.config import ConfigurationError, Settings
from trend_engine.models import Topic
from trend_engine.pipeline import TrendPipeline

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(message)s")


def topics_frame(topics: List[Topic]) -> pd.DataFrame:
    """Flatten topics into one row each, list columns joined with ``", "``."""
    rows = [
        {
            "id": topic.id,
            "topic": topic.topic,
            "description": topic.description,
            "engagement": topic.engagement,
            "growth": topic.growth,
            "hashtags": ", ".join(topic.hashtags),
            "related_topics": ", ".join(topic.related_topics),
        }
        for topic in topics
    ]
    columns = ["id", "topic", "description", "engagement", "growth", "hashtags", "related_topics"]
    return pd.DataFrame(rows, columns=columns)


# ---------------------------------------------------------------------------
# Entry-points
# ---------------------------------------------------------------------------

def serve(argv: Optional[List[str]] = None) -> None:
    """Run the API server."""
    parser = argparse.ArgumentParser(description="Serve the LinkedCraft API")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)

    _configure_logging()
    uvicorn.run("linkedcraft.api:create_app", factory=True, host=args.host, port=args.port, log_level="info")


def trends(argv: Optional[List[str]] = None) -> int:
    """Run the trend pipeline once; returns the process exit status."""
    parser = argparse.ArgumentParser(description="Fetch trending LinkedIn topics")
    parser.add_argument("--force-refresh", action="store_true", help="Ignore the cached snapshot")
    parser.add_argument("--csv", type=Path, default=None, help="Also write the topics to this CSV file")
    args = parser.parse_args(argv)

    _configure_logging()
    pipeline = TrendPipeline.from_settings(Settings.from_env())
    try:
        response = pipeline.run(force_refresh=args.force_refresh)
    except ConfigurationError as exc:
        LOGGER.error(f"❌ {exc}")
        return 1

    print(response.model_dump_json(by_alias=True, indent=2))
    LOGGER.info(f"📡 {len(response.trends)} topics from {response.source}")

    if args.csv:
        args.csv.parent.mkdir(parents=True, exist_ok=True)
        topics_frame(response.trends).to_csv(args.csv, index=False)
        LOGGER.info(f"💾 Topics saved: {args.csv}")
    return 0


def trends_main() -> None:
    sys.exit(trends())
