from taxi_fare.config import Config
from taxi_fare.data_loader import DataLoader
from taxi_fare.evaluator import RegressionMetrics, evaluate
from taxi_fare.inference import InferenceRunner
from taxi_fare.model import FareModel, predict
from taxi_fare.model_store import load_model, save_model
from taxi_fare.schema import TaxiTrip, TaxiTripFarePrediction
from taxi_fare.trainer import ModelTrainer

__all__ = [
    "Config",
    "DataLoader",
    "ModelTrainer",
    "FareModel",
    "RegressionMetrics",
    "InferenceRunner",
    "TaxiTrip",
    "TaxiTripFarePrediction",
    "evaluate",
    "predict",
    "load_model",
    "save_model",
]
