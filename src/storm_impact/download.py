"""
Download the NOAA Storm Data extract (1950–2011) into the raw data layer.

The file stays bz2-compressed on disk; pandas decompresses it on read.
An existing file is treated as a cache and not fetched again.

Usage:
    python -m storm_impact.download [--force]
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import requests

logger = logging.getLogger(__name__)

STORM_DATA_URL = (
    "https://d396qusza40orc.cloudfront.net/repdata%2Fdata%2FStormData.csv.bz2"
)
RAW_DATA_PATH = Path("data/01_raw/StormData.csv.bz2")


def download_storm_data(
    url: str = STORM_DATA_URL,
    target_path: str | Path = RAW_DATA_PATH,
    force: bool = False,
) -> Path:
    """
    Fetch the compressed storm-events CSV unless it is already present.

    Args:
        url: Source URL of the ``.csv.bz2`` file
        target_path: Where to store it
        force: Download again even if the file exists

    Returns:
        Path: Location of the local file
    """
    target = Path(target_path)
    if target.exists() and not force:
        logger.info("Already exists, skipping download: %s", target)
        return target

    target.parent.mkdir(parents=True, exist_ok=True)
    partial = target.with_name(target.name + ".part")

    logger.info("Downloading %s -> %s", url, target)
    with requests.get(url, stream=True, timeout=60) as response:
        response.raise_for_status()
        try:
            with open(partial, "wb") as f:
                for chunk in response.iter_content(chunk_size=8192):
                    f.write(chunk)
        except BaseException:
            partial.unlink(missing_ok=True)
            raise

    # Only a complete transfer replaces the cache
    partial.replace(target)

    logger.info(
        "Downloaded %.1f MB to %s",
        target.stat().st_size / 1024 / 1024,
        target,
    )
    return target


def main(argv: list[str] | None = None) -> Path:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--url", default=STORM_DATA_URL)
    parser.add_argument("--output", default=str(RAW_DATA_PATH))
    parser.add_argument(
        "--force", action="store_true", help="re-download even if cached"
    )
    args = parser.parse_args(argv)
    return download_storm_data(args.url, args.output, force=args.force)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    main()
