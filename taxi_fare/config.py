"""Run configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class Config:
    """Central configuration for training, evaluation and inference.

    Args:
        data_dir: Directory holding the train and test CSV files.
        train_file: Training set file name inside ``data_dir``.
        test_file: Test set file name inside ``data_dir``.
        models_dir: Directory the fitted model is persisted to.
        model_file: Model file name inside ``models_dir``.
        config_file: Config snapshot file name inside ``models_dir``.
        target_column: Column copied into the label.
        label_column: Training target column.
        categorical_features: Columns one-hot encoded before concatenation.
        feature_columns: Columns concatenated into the feature vector, in order.
        seed: Seed for the regressor and any tuning.
        n_trials: Number of Optuna trials; 0 keeps library defaults.
        n_cv_splits: Number of K-fold splits used while tuning.
        sample_seed: Seed for inference sampling; None draws fresh entropy.
        inference_mode: One of ``file``, ``samples``, ``random``, ``all``.
    """

    data_dir: str = "Data"
    train_file: str = "taxi-fare-train.csv"
    test_file: str = "taxi-fare-test.csv"

    models_dir: str = "Models"
    model_file: str = "Model.pkl"
    config_file: str = "config.json"

    target_column: str = "FareAmount"
    label_column: str = "Label"

    categorical_features: list[str] = field(default_factory=lambda: [
        "VendorId",
        "RateCode",
        "PaymentType",
    ])

    feature_columns: list[str] = field(default_factory=lambda: [
        "VendorId",
        "RateCode",
        "PassengerCount",
        "TripTime",
        "TripDistance",
        "PaymentType",
    ])

    seed: int = 0

    # Tuning
    n_trials: int = 0
    n_cv_splits: int = 5

    # Inference
    sample_seed: int | None = None
    inference_mode: str = "file"

    @property
    def train_path(self) -> str:
        return os.path.join(self.data_dir, self.train_file)

    @property
    def test_path(self) -> str:
        return os.path.join(self.data_dir, self.test_file)

    @property
    def model_path(self) -> str:
        return os.path.join(self.models_dir, self.model_file)

    @property
    def config_path(self) -> str:
        return os.path.join(self.models_dir, self.config_file)
