"""Regression quality metrics on a held-out set."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import polars as pl
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score

from taxi_fare.config import Config
from taxi_fare.features import add_label
from taxi_fare.model import FareModel

logger = logging.getLogger("TaxiFare")


@dataclass(frozen=True)
class RegressionMetrics:
    r_squared: float
    rms: float
    mean_absolute_error: float
    mean_squared_error: float


def format_number(value: float, places: int) -> str:
    """Format with at most ``places`` decimals, dropping trailing zeros."""
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def evaluate(model: FareModel, test_df: pl.DataFrame, config: Config) -> RegressionMetrics:
    """Score ``model`` against a labeled frame disjoint from training data.

    Args:
        model: Fitted model.
        test_df: Loaded test frame.
        config: Run configuration.

    Returns:
        R2, RMS, L1 and L2 of the predictions against the label.
    """
    df = add_label(test_df, config)
    y_true = df.select(config.label_column).to_numpy().ravel()
    y_pred = model.predict_frame(df)

    mse = float(mean_squared_error(y_true, y_pred))
    metrics = RegressionMetrics(
        r_squared=float(r2_score(y_true, y_pred)),
        rms=float(np.sqrt(mse)),
        mean_absolute_error=float(mean_absolute_error(y_true, y_pred)),
        mean_squared_error=mse,
    )
    logger.info(
        "Evaluated %d rows: R2=%.4f RMS=%.4f MAE=%.4f",
        df.height, metrics.r_squared, metrics.rms, metrics.mean_absolute_error,
    )
    return metrics


def format_metrics_report(metrics: RegressionMetrics) -> str:
    return "\n".join([
        "",
        "*************************************************",
        "*       Model quality metrics evaluation         ",
        "*------------------------------------------------",
        f"*       R2 Score:      {format_number(metrics.r_squared, 2)}",
        f"*       RMS loss:      {format_number(metrics.rms, 2)}",
        "*************************************************",
        "",
    ])
