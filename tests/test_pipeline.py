"""End-to-end tests for the command-line entry point."""
import os

import pytest

import predict_taxi_fare
from taxi_fare.data_utils import generate_synthetic_data
from taxi_fare.trainer import ModelTrainer


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_first_run_trains_saves_and_evaluates(workdir, capsys):
    predict_taxi_fare.main(["--generate-data", "800", "--sample-seed", "1"])

    assert (workdir / "Data" / "taxi-fare-train.csv").exists()
    assert (workdir / "Models" / "Model.pkl").exists()
    assert (workdir / "Models" / "config.json").exists()
    out = capsys.readouterr().out
    assert "R2 Score:" in out
    assert "RMS loss:" in out
    assert "Predicted fare: " in out


def test_second_run_reuses_saved_model(workdir, capsys, monkeypatch):
    predict_taxi_fare.main(["--generate-data", "800"])
    capsys.readouterr()

    def fail(*args, **kwargs):
        raise AssertionError("should not retrain")

    monkeypatch.setattr(ModelTrainer, "train", fail)
    predict_taxi_fare.main(["--mode", "all", "--sample-seed", "2"])

    out = capsys.readouterr().out
    assert "R2 Score:" not in out
    assert "actual fare: 15.5" in out
    assert "actual fare: unknown" in out


def test_missing_test_file_is_reported(workdir, capsys):
    predict_taxi_fare.main(["--generate-data", "800"])
    os.remove(workdir / "Data" / "taxi-fare-test.csv")
    capsys.readouterr()

    predict_taxi_fare.main([])

    assert "taxi-fare-test.csv not found." in capsys.readouterr().out


def test_missing_training_file_is_fatal(workdir):
    with pytest.raises(FileNotFoundError):
        predict_taxi_fare.main([])


@pytest.mark.parametrize("contents", [
    "vendor_id,rate_code,passenger_count,trip_time_in_secs,trip_distance,payment_type,fare_amount\n",
    "",
])
def test_test_file_without_rows_skips_evaluation(workdir, capsys, contents):
    generate_synthetic_data(str(workdir / "Data" / "taxi-fare-train.csv"), rows=300, seed=0)
    (workdir / "Data" / "taxi-fare-test.csv").write_text(contents)

    predict_taxi_fare.main([])

    assert (workdir / "Models" / "Model.pkl").exists()
    assert "R2 Score:" not in capsys.readouterr().out
