from __future__ import annotations

import logging
import os

import numpy as np
import polars as pl

from taxi_fare.schema import TRIP_SCHEMA

logger = logging.getLogger("TaxiFare")

_HEADER = [
    "vendor_id",
    "rate_code",
    "passenger_count",
    "trip_time_in_secs",
    "trip_distance",
    "payment_type",
    "fare_amount",
]


def synthetic_trips(rows: int, seed: int = 0) -> pl.DataFrame:
    """Generate trips with realistic fare, distance and duration relations."""
    rng = np.random.default_rng(seed)

    trip_distance = rng.lognormal(mean=1.0, sigma=0.7, size=rows).clip(0.1, 80)

    # Duration correlated with distance
    speed_mph = rng.normal(12, 4, size=rows).clip(3, 40)
    trip_time = ((trip_distance / speed_mph) * 3600).round(-1).clip(60, 7200)

    vendor_id = rng.choice(["VTS", "CMT"], size=rows)
    rate_code = rng.choice(["1", "2", "5"], size=rows, p=[0.95, 0.03, 0.02])
    payment_type = rng.choice(["CRD", "CSH"], size=rows, p=[0.6, 0.4])
    passenger_count = rng.choice(
        [1, 2, 3, 4, 5, 6], size=rows,
        p=[0.70, 0.14, 0.05, 0.03, 0.05, 0.03],
    ).astype(np.float64)

    # Fare: flag drop + per mile + per minute + noise; JFK flat rate code 2
    fare_amount = 2.5 + 2.0 * trip_distance + 0.35 * trip_time / 60 + rng.normal(0, 1.0, size=rows)
    fare_amount = np.where(rate_code == "2", 52.0, fare_amount).clip(2.5, 300).round(1)

    return pl.DataFrame(
        {
            "VendorId": vendor_id,
            "RateCode": rate_code,
            "PassengerCount": passenger_count,
            "TripTime": trip_time,
            "TripDistance": trip_distance.round(2),
            "PaymentType": payment_type,
            "FareAmount": fare_amount,
        },
        schema=TRIP_SCHEMA,
        strict=False,
    )


def generate_synthetic_data(path: str, rows: int = 10_000, seed: int = 0) -> str:
    """Write a synthetic trip file in the input CSV layout.

    Args:
        path: Destination CSV path; parent directories are created.
        rows: Number of data rows.
        seed: Random seed for reproducibility.

    Returns:
        The written path.
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    df = synthetic_trips(rows, seed)
    df.columns = _HEADER
    df.write_csv(path)
    logger.info("Generated synthetic %s (%d rows)", path, rows)
    return path
