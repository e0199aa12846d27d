#!/usr/bin/env python3
"""Reading optional fields from a release payload.

This demonstrates using the helpers directly:

* load settings from `.env`
* read nested release fields that may be missing
* map a release date onto its calendar year range

The payload is read from a JSON file passed as an argument.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

from releases_integration import IntegrationSettings, dig, resolve
from releases_integration.utils.dates import (
    InvalidDateError,
    calendar_year_to_date_range,
    get_year,
)

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarise releases from a JSON release package.")
    parser.add_argument("path", type=Path, help="Path to a release package JSON file")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = IntegrationSettings()
    settings.setup_logging()

    package = json.loads(args.path.read_text(encoding="utf-8"))

    for release in package.get("releases", []):
        amount = resolve(lambda: release.get("tender").get("value").get("amount"))
        buyer = dig(release, "buyer", "name")
        released = release.get("date")

        period = None
        if released:
            try:
                period = calendar_year_to_date_range(get_year(released))
            except InvalidDateError:
                logger.warning("Skipping unparseable release date", extra={"date": released})

        print(f"{release.get('ocid')}: buyer={buyer} amount={amount} period={period}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
