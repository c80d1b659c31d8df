# scripts/print_partition_keys.py

import sys
from pathlib import Path

# Ensure project root is on the path when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import logging

from app.config.logging import configure_logging
from app.config.settings import get_settings
from app.domain.partition_key import deterministic_partition_key

logger = logging.getLogger(__name__)

LOREM_KEY = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Vestibulum ut tellus euismod, "
    "malesuada eros ac, bibendum nunc. Nullam sodales nulla augue, a congue ante congue eu. "
    "Pellentesque ut massa eget libero bibendum fermentum quis a nisl."
)

SAMPLE_EVENTS = [
    None,
    {},
    {"partitionKey": "my-key"},
    {"foo": "bar"},
    "string",
    "string",
    1,
    1,
    {"partitionKey": LOREM_KEY},
    {"partitionKey": LOREM_KEY + " Vestibulum rhoncus."},
]


def main() -> None:
    configure_logging(get_settings().log_level)
    logger.info("printing %d sample partition keys", len(SAMPLE_EVENTS))
    for event in SAMPLE_EVENTS:
        print(deterministic_partition_key(event))


if __name__ == "__main__":
    main()
