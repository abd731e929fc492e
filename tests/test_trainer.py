"""Tests for model training and hyperparameter tuning."""
from dataclasses import replace

import lightgbm as lgb
import numpy as np

from taxi_fare.evaluator import evaluate
from taxi_fare.model import FareModel
from taxi_fare.trainer import ModelTrainer


def test_pipeline_uses_seed_and_default_hyperparameters(config):
    pipeline = ModelTrainer(config).build_pipeline()
    regressor = pipeline.named_steps["regressor"]

    assert isinstance(regressor, lgb.LGBMRegressor)
    assert regressor.random_state == 0
    assert regressor.n_estimators == lgb.LGBMRegressor().n_estimators
    assert regressor.learning_rate == lgb.LGBMRegressor().learning_rate


def test_train_returns_fitted_model(fitted_model, session_config):
    assert isinstance(fitted_model, FareModel)
    assert fitted_model.feature_columns == tuple(session_config.feature_columns)
    assert "lightgbm" in fitted_model.library_versions


def test_training_is_deterministic(session_config, train_df, test_df, fitted_model):
    retrained = ModelTrainer(session_config).train(train_df)

    np.testing.assert_array_equal(
        retrained.predict_frame(test_df), fitted_model.predict_frame(test_df)
    )
    assert evaluate(retrained, test_df, session_config) == evaluate(
        fitted_model, test_df, session_config
    )


def test_tuning_disabled_by_default(config, train_df):
    assert ModelTrainer(config).tune_hyperparameters(train_df) == {}


def test_tuning_is_reproducible(config, train_df):
    tuned_config = replace(config, n_trials=2, n_cv_splits=2)
    sample = train_df.head(500)

    first = ModelTrainer(tuned_config).tune_hyperparameters(sample)
    second = ModelTrainer(tuned_config).tune_hyperparameters(sample)

    assert first == second
    assert {"learning_rate", "num_leaves", "max_depth", "subsample"} <= set(first)
    assert first["subsample_freq"] == 1

    model = ModelTrainer(tuned_config).train(sample, first)
    regressor = model.pipeline.named_steps["regressor"]
    assert regressor.num_leaves == first["num_leaves"]
    assert regressor.subsample == first["subsample"]
    assert regressor.subsample_freq == 1
