from __future__ import annotations

import logging
from typing import Any

import lightgbm as lgb
import numpy as np
import optuna
import polars as pl
from sklearn.metrics import mean_squared_error
from sklearn.model_selection import KFold
from sklearn.pipeline import Pipeline

from taxi_fare.config import Config
from taxi_fare.features import add_label, build_feature_transformer, feature_input
from taxi_fare.model import FareModel

logger = logging.getLogger("TaxiFare")


class ModelTrainer:
    def __init__(self, config: Config) -> None:
        self._config = config

    def _prepare_arrays(self, df: pl.DataFrame) -> tuple[Any, np.ndarray]:
        if self._config.label_column not in df.columns:
            df = add_label(df, self._config)
        X = feature_input(df, self._config.feature_columns)
        y = df.select(self._config.label_column).to_numpy().ravel()
        return X, y

    def _regressor_params(self, params: dict[str, Any] | None) -> dict[str, Any]:
        # Fixed seed and deterministic mode make repeated fits identical.
        return {
            "objective": "regression",
            "random_state": self._config.seed,
            "deterministic": True,
            "force_row_wise": True,
            "verbosity": -1,
            **(params or {}),
        }

    def build_pipeline(self, params: dict[str, Any] | None = None) -> Pipeline:
        """Return the unfitted encode-concatenate-regress pipeline."""
        return Pipeline(steps=[
            ("features", build_feature_transformer(self._config)),
            ("regressor", lgb.LGBMRegressor(**self._regressor_params(params))),
        ])

    def tune_hyperparameters(self, train_df: pl.DataFrame) -> dict[str, Any]:
        """Search LightGBM hyperparameters with Optuna over K-fold RMSE.

        Returns an empty dict when ``config.n_trials`` is 0, which keeps
        library defaults.
        """
        if self._config.n_trials <= 0:
            return {}

        X, y = self._prepare_arrays(train_df)
        kfold = KFold(
            n_splits=self._config.n_cv_splits,
            shuffle=True,
            random_state=self._config.seed,
        )

        def objective(trial: optuna.Trial) -> float:
            params: dict[str, Any] = {
                "learning_rate": trial.suggest_float("learning_rate", 0.01, 0.3, log=True),
                "num_leaves": trial.suggest_int("num_leaves", 16, 256),
                "max_depth": trial.suggest_int("max_depth", 3, 12),
                "min_child_samples": trial.suggest_int("min_child_samples", 5, 100),
                "subsample": trial.suggest_float("subsample", 0.5, 1.0),
                "subsample_freq": 1,
                "colsample_bytree": trial.suggest_float("colsample_bytree", 0.5, 1.0),
                "reg_alpha": trial.suggest_float("reg_alpha", 1e-8, 10.0, log=True),
                "reg_lambda": trial.suggest_float("reg_lambda", 1e-8, 10.0, log=True),
            }

            rmse_scores: list[float] = []
            for train_idx, val_idx in kfold.split(X):
                pipeline = self.build_pipeline(params)
                pipeline.fit(X.iloc[train_idx], y[train_idx])
                y_pred = pipeline.predict(X.iloc[val_idx])
                rmse_scores.append(float(np.sqrt(mean_squared_error(y[val_idx], y_pred))))

            return float(np.mean(rmse_scores))

        optuna.logging.set_verbosity(optuna.logging.WARNING)
        study = optuna.create_study(
            direction="minimize",
            study_name="taxi_fare_tuning",
            sampler=optuna.samplers.TPESampler(seed=self._config.seed),
        )
        study.optimize(objective, n_trials=self._config.n_trials)

        logger.info(
            "Best trial %d: RMSE %.4f", study.best_trial.number, study.best_value,
        )
        return {**study.best_trial.params, "subsample_freq": 1}

    def train(
        self, train_df: pl.DataFrame, params: dict[str, Any] | None = None
    ) -> FareModel:
        """Fit the pipeline against the label column.

        Args:
            train_df: Loaded training frame; the label is added if absent.
            params: Regressor hyperparameters overriding library defaults.

        Returns:
            Fitted, immutable model.
        """
        X, y = self._prepare_arrays(train_df)
        pipeline = self.build_pipeline(params)

        logger.info("=============== Create and Train the Model ===============")
        pipeline.fit(X, y)
        logger.info("=============== End of training ===============")

        return FareModel(
            pipeline=pipeline,
            feature_columns=tuple(self._config.feature_columns),
        )
