"""Fitted fare model."""

from __future__ import annotations

from dataclasses import dataclass, field

import lightgbm as lgb
import numpy as np
import polars as pl
import sklearn
from sklearn.pipeline import Pipeline

from taxi_fare.data_loader import DataLoader
from taxi_fare.features import feature_input
from taxi_fare.schema import TaxiTrip, TaxiTripFarePrediction


@dataclass(frozen=True)
class FareModel:
    """Fitted feature transformer and regressor bound to one feature order.

    Args:
        pipeline: Fitted ``features`` -> ``regressor`` pipeline.
        feature_columns: Column order the pipeline was fitted on.
        library_versions: Versions of the libraries that produced the fit.
    """

    pipeline: Pipeline
    feature_columns: tuple[str, ...]
    library_versions: dict[str, str] = field(default_factory=lambda: {
        "lightgbm": lgb.__version__,
        "scikit-learn": sklearn.__version__,
        "polars": pl.__version__,
    })

    def _input(self, df: pl.DataFrame):
        return feature_input(df, list(self.feature_columns))

    def transform(self, df: pl.DataFrame) -> np.ndarray:
        """Return the feature vectors the regressor sees for ``df``."""
        return self.pipeline.named_steps["features"].transform(self._input(df))

    def predict_frame(self, df: pl.DataFrame) -> np.ndarray:
        return self.pipeline.predict(self._input(df))

    def predict(self, trip: TaxiTrip) -> TaxiTripFarePrediction:
        """Predict the fare of a single trip."""
        score = self.predict_frame(DataLoader.trips_to_frame([trip]))[0]
        return TaxiTripFarePrediction(fare_amount=float(score))


def predict(model: FareModel, trip: TaxiTrip) -> TaxiTripFarePrediction:
    return model.predict(trip)
