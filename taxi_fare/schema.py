"""Trip records and the fixed input schema."""

from __future__ import annotations

from dataclasses import dataclass

import polars as pl

from taxi_fare.errors import MalformedDataError

# Positional order of the input file columns.
TRIP_SCHEMA: dict[str, pl.DataType] = {
    "VendorId": pl.String,
    "RateCode": pl.String,
    "PassengerCount": pl.Float32,
    "TripTime": pl.Float32,
    "TripDistance": pl.Float32,
    "PaymentType": pl.String,
    "FareAmount": pl.Float32,
}

COLUMN_NAMES: list[str] = list(TRIP_SCHEMA)


@dataclass(frozen=True)
class TaxiTrip:
    """One taxi trip as read from the input file.

    ``fare_amount`` is the label during training and the observed fare
    during inference; set it to 0 when the fare is unknown.
    """

    vendor_id: str
    rate_code: str
    passenger_count: float
    trip_time: float
    trip_distance: float
    payment_type: str
    fare_amount: float = 0.0

    @classmethod
    def from_csv_line(cls, line: str) -> TaxiTrip:
        """Parse a single comma-separated data line.

        Raises:
            MalformedDataError: If the field count is wrong or a numeric
                field does not parse.
        """
        fields = line.strip().split(",")
        if len(fields) != len(COLUMN_NAMES):
            raise MalformedDataError(
                f"Expected {len(COLUMN_NAMES)} fields, got {len(fields)}: {line!r}"
            )
        try:
            return cls(
                vendor_id=fields[0],
                rate_code=fields[1],
                passenger_count=float(fields[2]),
                trip_time=float(fields[3]),
                trip_distance=float(fields[4]),
                payment_type=fields[5],
                fare_amount=float(fields[6]),
            )
        except ValueError as exc:
            raise MalformedDataError(f"Cannot parse line {line!r}: {exc}") from exc

    def to_row(self) -> dict[str, object]:
        """Return the record keyed by frame column name."""
        return {
            "VendorId": str(self.vendor_id),
            "RateCode": str(self.rate_code),
            "PassengerCount": float(self.passenger_count),
            "TripTime": float(self.trip_time),
            "TripDistance": float(self.trip_distance),
            "PaymentType": str(self.payment_type),
            "FareAmount": float(self.fare_amount),
        }


@dataclass(frozen=True)
class TaxiTripFarePrediction:
    fare_amount: float
