"""Taxi fare prediction: train, evaluate, persist and query a fare model.

Trains a LightGBM regressor behind one-hot encoded trip attributes when no
saved model exists, otherwise reuses the saved one, then runs sample
predictions against the test set.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from taxi_fare.config import Config
from taxi_fare.data_loader import DataLoader
from taxi_fare.data_utils import generate_synthetic_data
from taxi_fare.evaluator import evaluate, format_metrics_report
from taxi_fare.inference import INFERENCE_MODES, InferenceRunner
from taxi_fare.model import FareModel
from taxi_fare.model_store import load_model, save_config_snapshot, save_model
from taxi_fare.trainer import ModelTrainer

logger = logging.getLogger("TaxiFare")


def train_and_evaluate(config: Config) -> FareModel:
    """Fit on the training file, save the model, score it on the test file."""
    loader = DataLoader(config)
    train_df = loader.load(config.train_path)

    trainer = ModelTrainer(config)
    params = trainer.tune_hyperparameters(train_df)
    model = trainer.train(train_df, params)

    save_model(model, config.model_path)
    save_config_snapshot(config, config.config_path)

    if not os.path.exists(config.test_path):
        logger.warning("Test file %s missing, skipping evaluation", config.test_path)
        return model

    test_df = loader.load(config.test_path)
    if test_df.height == 0:
        logger.warning("Test file %s has no data rows, skipping evaluation", config.test_path)
    else:
        metrics = evaluate(model, test_df, config)
        print(format_metrics_report(metrics))

    return model


def run_pipeline(config: Config, retrain: bool = False) -> None:
    """Train or load the model, then run the configured inference mode."""
    logger.info("Working directory: %s", os.getcwd())

    if retrain or not os.path.exists(config.model_path):
        model = train_and_evaluate(config)
    else:
        model = load_model(config.model_path)

    InferenceRunner(config, model=model).run(config.inference_mode)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    defaults = Config()
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--data-dir", default=defaults.data_dir)
    parser.add_argument("--models-dir", default=defaults.models_dir)
    parser.add_argument("--mode", choices=INFERENCE_MODES, default=defaults.inference_mode)
    parser.add_argument("--seed", type=int, default=defaults.seed)
    parser.add_argument("--sample-seed", type=int, default=None)
    parser.add_argument("--tune-trials", type=int, default=defaults.n_trials)
    parser.add_argument("--retrain", action="store_true",
                        help="train even if a saved model exists")
    parser.add_argument("--generate-data", type=int, metavar="ROWS", default=0,
                        help="write synthetic train/test files before running")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    args = parse_args(argv)

    config = Config(
        data_dir=args.data_dir,
        models_dir=args.models_dir,
        seed=args.seed,
        n_trials=args.tune_trials,
        sample_seed=args.sample_seed,
        inference_mode=args.mode,
    )

    if args.generate_data:
        generate_synthetic_data(config.train_path, rows=args.generate_data, seed=config.seed)
        generate_synthetic_data(
            config.test_path, rows=max(args.generate_data // 4, 1), seed=config.seed + 1,
        )

    run_pipeline(config, retrain=args.retrain)


if __name__ == "__main__":
    sys.exit(main())
