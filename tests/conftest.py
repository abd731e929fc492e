"""Pytest configuration and shared fixtures."""
import pytest

from taxi_fare.config import Config
from taxi_fare.data_loader import DataLoader
from taxi_fare.data_utils import generate_synthetic_data
from taxi_fare.trainer import ModelTrainer


@pytest.fixture(scope="session")
def data_dir(tmp_path_factory):
    """Synthetic train/test files shared by the whole session."""
    data_dir = tmp_path_factory.mktemp("Data")
    generate_synthetic_data(str(data_dir / "taxi-fare-train.csv"), rows=2000, seed=0)
    generate_synthetic_data(str(data_dir / "taxi-fare-test.csv"), rows=400, seed=1)
    return data_dir


@pytest.fixture
def config(data_dir, tmp_path):
    return Config(
        data_dir=str(data_dir),
        models_dir=str(tmp_path / "Models"),
        sample_seed=7,
    )


@pytest.fixture(scope="session")
def session_config(data_dir, tmp_path_factory):
    return Config(
        data_dir=str(data_dir),
        models_dir=str(tmp_path_factory.mktemp("Models")),
        sample_seed=7,
    )


@pytest.fixture(scope="session")
def train_df(session_config):
    return DataLoader(session_config).load(session_config.train_path)


@pytest.fixture(scope="session")
def test_df(session_config):
    return DataLoader(session_config).load(session_config.test_path)


@pytest.fixture(scope="session")
def fitted_model(session_config, train_df):
    """Model trained once with library defaults."""
    return ModelTrainer(session_config).train(train_df)
