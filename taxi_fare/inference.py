"""Single-trip predictions against a persisted model."""

from __future__ import annotations

import logging
import os

import numpy as np

from taxi_fare.config import Config
from taxi_fare.evaluator import format_number
from taxi_fare.model import FareModel, predict
from taxi_fare.model_store import load_model
from taxi_fare.schema import TaxiTrip, TaxiTripFarePrediction

logger = logging.getLogger("TaxiFare")

# vendor_id,rate_code,passenger_count,trip_time_in_secs,trip_distance,payment_type,fare_amount
LITERAL_SAMPLES: list[TaxiTrip] = [
    TaxiTrip("VTS", "1", 4, 1140, 3.75, "CRD", 15.5),
    TaxiTrip("VTS", "1", 2, 1140, 6.29, "CRD", 21.0),
]

VENDORS = ("VTS", "CMT")
PAYMENT_TYPES = ("CSH", "CRD")

_RULE = "*" * 70

INFERENCE_MODES = ("file", "samples", "random", "all")


def format_fare_line(prediction: TaxiTripFarePrediction, actual: float | None) -> str:
    actual_text = "unknown" if actual is None else format_number(actual, 4)
    return (
        f"Predicted fare: {format_number(prediction.fare_amount, 4)}, "
        f"actual fare: {actual_text}"
    )


def format_trip_report(
    trip: TaxiTrip, prediction: TaxiTripFarePrediction, actual: float | None
) -> str:
    return "\n".join([
        _RULE,
        f"VendorId:       {trip.vendor_id}",
        f"RateCode:       {trip.rate_code}",
        f"PassengerCount: {format_number(trip.passenger_count, 4)}",
        f"TripTime:       {format_number(trip.trip_time, 4)}",
        f"TripDistance:   {format_number(trip.trip_distance, 4)}",
        f"PaymentType:    {trip.payment_type}",
        format_fare_line(prediction, actual),
        _RULE,
        "",
    ])


def random_trip(rng: np.random.Generator) -> TaxiTrip:
    """Draw a synthetic trip with an unknown fare.

    Passenger count is 1-5, trip time is a multiple of 10 seconds in
    60..10990, distance is in [0.1, 100.1), rate code is always metered.
    """
    vendor_id = VENDORS[0] if rng.integers(2) == 0 else VENDORS[1]
    payment_type = PAYMENT_TYPES[0] if rng.integers(2) == 0 else PAYMENT_TYPES[1]
    return TaxiTrip(
        vendor_id=vendor_id,
        rate_code="1",
        passenger_count=float(rng.integers(1, 6)),
        trip_time=float(rng.integers(6, 1100) * 10),
        trip_distance=float(rng.random() * 100.0 + 0.1),
        payment_type=payment_type,
        fare_amount=0.0,
    )


def data_lines(text: str) -> list[str]:
    """Split file contents into data lines, dropping the header and blanks."""
    return [line for line in text.split("\n")[1:] if line.strip()]


class InferenceRunner:
    """Builds prediction requests and prints a report for each.

    The model is loaded from ``config.model_path`` on first use unless one
    is passed in. Nothing here writes to disk.

    Args:
        config: Run configuration.
        model: Already fitted model, if any.
        rng: Random generator for sampled requests.
    """

    def __init__(
        self,
        config: Config,
        model: FareModel | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self._config = config
        self._model = model
        self._rng = rng if rng is not None else np.random.default_rng(config.sample_seed)

    @property
    def model(self) -> FareModel:
        if self._model is None:
            self._model = load_model(self._config.model_path)
        return self._model

    def predict(self, trip: TaxiTrip) -> TaxiTripFarePrediction:
        return predict(self.model, trip)

    def run_literal_samples(self) -> list[TaxiTripFarePrediction]:
        predictions = []
        for trip in LITERAL_SAMPLES:
            prediction = self.predict(trip)
            print(_RULE)
            print(format_fare_line(prediction, trip.fare_amount))
            print(_RULE + "\n")
            predictions.append(prediction)
        return predictions

    def run_file_sample(self, path: str | None = None) -> TaxiTrip | None:
        """Predict one uniformly chosen row of the test file.

        Returns:
            The sampled trip, or None when the file is missing or has no
            data rows.
        """
        path = path or self._config.test_path
        if not os.path.exists(path):
            print(f"{path} not found.")
            return None

        with open(path) as f:
            lines = data_lines(f.read())
        if not lines:
            logger.warning("No data rows in %s", path)
            return None

        line = lines[int(self._rng.integers(len(lines)))]
        trip = TaxiTrip.from_csv_line(line)
        prediction = self.predict(trip)
        print(format_trip_report(trip, prediction, trip.fare_amount))
        return trip

    def run_random_sample(self) -> TaxiTrip:
        trip = random_trip(self._rng)
        prediction = self.predict(trip)
        print(format_trip_report(trip, prediction, None))
        return trip

    def run(self, mode: str) -> None:
        if mode not in INFERENCE_MODES:
            raise ValueError(f"Unknown inference mode {mode!r}, expected one of {INFERENCE_MODES}")
        if mode in ("samples", "all"):
            self.run_literal_samples()
        if mode in ("file", "all"):
            self.run_file_sample()
        if mode in ("random", "all"):
            self.run_random_sample()
