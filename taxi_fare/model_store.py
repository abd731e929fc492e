"""Model persistence."""

from __future__ import annotations

import json
import logging
import os
import pickle
from dataclasses import asdict

from taxi_fare.config import Config
from taxi_fare.errors import ModelLoadError
from taxi_fare.model import FareModel

logger = logging.getLogger("TaxiFare")

FORMAT_VERSION = 1


def save_model(model: FareModel, path: str) -> None:
    """Pickle ``model`` to ``path``, overwriting any existing file.

    The parent directory is created when missing. The write is not atomic.
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    envelope = {"format_version": FORMAT_VERSION, "model": model}
    with open(path, "wb") as f:
        pickle.dump(envelope, f)
    logger.info("The model is saved to %s", path)


def load_model(path: str) -> FareModel:
    """Load a model written by :func:`save_model`.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ModelLoadError: If the file is truncated, corrupt, or written with
            another format version.
    """
    with open(path, "rb") as f:
        try:
            envelope = pickle.load(f)
        except (
            pickle.UnpicklingError, EOFError, AttributeError, ImportError,
            IndexError, KeyError, TypeError, ValueError,
        ) as exc:
            raise ModelLoadError(f"Cannot read model file {path}: {exc}") from exc

    if not isinstance(envelope, dict) or "format_version" not in envelope:
        raise ModelLoadError(f"{path} is not a taxi fare model file")
    version = envelope["format_version"]
    if version != FORMAT_VERSION:
        raise ModelLoadError(
            f"{path} has format version {version}, expected {FORMAT_VERSION}"
        )
    model = envelope.get("model")
    if not isinstance(model, FareModel):
        raise ModelLoadError(f"{path} does not contain a fitted fare model")

    logger.info("Loaded model from %s", path)
    return model


def save_config_snapshot(config: Config, path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w") as f:
        json.dump(asdict(config), f, indent=2, default=str)
    logger.info("Config saved to %s", path)
