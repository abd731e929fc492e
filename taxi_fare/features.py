"""Label copy, one-hot encoding and feature concatenation."""

from __future__ import annotations

import pandas as pd
import polars as pl
from sklearn.compose import ColumnTransformer
from sklearn.preprocessing import OneHotEncoder

from taxi_fare.config import Config


def add_label(df: pl.DataFrame, config: Config) -> pl.DataFrame:
    """Copy the target column into the label column."""
    return df.with_columns(pl.col(config.target_column).alias(config.label_column))


def feature_input(df: pl.DataFrame, columns: list[str]) -> pd.DataFrame:
    """Select the feature columns in concatenation order for scikit-learn."""
    return df.select(columns).to_pandas()


def build_feature_transformer(config: Config) -> ColumnTransformer:
    """Build the encoder that turns trip columns into one feature vector.

    Categorical columns are one-hot encoded independently with the
    vocabulary seen at fit time; unseen values encode to all zeros.
    Numeric columns pass through. Output blocks follow
    ``config.feature_columns`` order and all other columns are dropped.

    Args:
        config: Run configuration.

    Returns:
        Unfitted ColumnTransformer with dense output.
    """
    transformers = []
    for col in config.feature_columns:
        if col in config.categorical_features:
            encoder = OneHotEncoder(handle_unknown="ignore", sparse_output=False)
            transformers.append((col, encoder, [col]))
        else:
            transformers.append((col, "passthrough", [col]))

    return ColumnTransformer(
        transformers=transformers,
        remainder="drop",
        sparse_threshold=0.0,
    )
