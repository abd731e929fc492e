"""CSV loading with the fixed trip schema."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

import polars as pl

from taxi_fare.config import Config
from taxi_fare.errors import MalformedDataError
from taxi_fare.schema import TRIP_SCHEMA, TaxiTrip

logger = logging.getLogger("TaxiFare")


class DataLoader:
    """Reads trip files into polars frames with the fixed schema.

    Columns are bound by position, the header row is skipped and never
    used for naming or type inference.

    Args:
        config: Run configuration.
    """

    def __init__(self, config: Config) -> None:
        self._config = config

    def scan(self, path: str) -> pl.LazyFrame:
        """Lazily scan a comma-separated trip file.

        Args:
            path: CSV file with a header row and seven columns.

        Returns:
            LazyFrame with the trip schema. Nothing is read until collected.
        """
        if not os.path.exists(path):
            raise FileNotFoundError(f"Data file not found: {path}")
        return pl.scan_csv(
            path,
            separator=",",
            has_header=False,
            skip_rows=1,
            schema=TRIP_SCHEMA,
        )

    def load(self, path: str) -> pl.DataFrame:
        """Collect a trip file into memory and validate every row.

        Args:
            path: CSV file with a header row and seven columns.

        Returns:
            Materialized DataFrame.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            MalformedDataError: If any row has the wrong number of fields or
                a value that does not parse as its column type.
        """
        try:
            df = self.scan(path).collect()
        except pl.exceptions.PolarsError as exc:
            raise MalformedDataError(f"Failed to parse {path}: {exc}") from exc

        # Blank lines scan as all-null rows
        df = df.filter(~pl.all_horizontal(pl.all().is_null()))

        null_counts = df.null_count().row(0, named=True)
        broken = {col: n for col, n in null_counts.items() if n}
        if broken:
            raise MalformedDataError(
                f"Missing values in {path}: "
                + ", ".join(f"{col}={n}" for col, n in broken.items())
            )

        logger.info("Loaded %d rows from %s", df.height, path)
        return df

    @staticmethod
    def trips_to_frame(trips: Iterable[TaxiTrip]) -> pl.DataFrame:
        """Build a frame from trip records using the file schema.

        Values go through the same dtype casts as file rows, so a parsed
        line and the loaded file row produce identical feature input.
        """
        return pl.DataFrame([trip.to_row() for trip in trips], schema=TRIP_SCHEMA)
