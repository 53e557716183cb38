"""Training script for the season win percentage model.

This module fits a regression model that predicts a team's win percentage
from its per-game averages, using the same CSV record store the API serves.
It writes trained artifacts (model + metadata) to the artifacts directory.

Environment variables:
    NBA_CONFIG_PATH: API config file; its datastore section selects the seasons
    MODEL_NAME: Artifact/model identifier (default "ridge_v1")
    ARTIFACT_DIR: Output directory for model files (default "artifacts")
"""

import json
import logging
import math
import os

import joblib
from sklearn.linear_model import Ridge
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score
from sklearn.model_selection import train_test_split
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler

from app.datastore import FEATURE_COLUMNS, LABEL_COLUMN, Dataset, build_store
from app.settings import load_settings
from common.logging import configure_logging

logger = logging.getLogger(__name__)

MODEL_NAME = os.getenv("MODEL_NAME", "ridge_v1")
ARTIFACT_DIR = os.getenv("ARTIFACT_DIR", "artifacts")

FEATURE_COLS = [c.json_name for c in FEATURE_COLUMNS]
LABEL_COL = LABEL_COLUMN.json_name
MIN_ROWS = 10


def train_model(dataset: Dataset, artifact_dir=ARTIFACT_DIR, model_name=MODEL_NAME, test_size=0.25, random_state=42):
    """Fit StandardScaler + Ridge on a dataset and write the artifacts.

    Writes:
        - `<artifact_dir>/<model_name>.joblib`: the fitted pipeline
        - `<artifact_dir>/<model_name>.json`: feature columns and evaluation metrics

    Args:
        dataset: Features and win percentage labels from the record store.
        artifact_dir: Output directory, created if missing.
        model_name: Artifact file stem.
        test_size: Held-out fraction used for the metrics.
        random_state: Seed for the split and the model.

    Returns:
        dict: The metadata written next to the model.

    Raises:
        SystemExit: If there are fewer than 10 rows to train on.
    """
    df = dataset.to_frame()
    if len(df) < MIN_ROWS:
        raise SystemExit(f"Not enough rows to train (need >= {MIN_ROWS}). Found: {len(df)}")

    X = df[FEATURE_COLS].astype(float)
    y = df[LABEL_COL].astype(float)

    X_train, X_test, y_train, y_test = train_test_split(
        X, y, test_size=test_size, random_state=random_state
    )

    pipe = Pipeline(
        steps=[
            ("scaler", StandardScaler()),
            ("model", Ridge(alpha=1.0, random_state=random_state)),
        ]
    )
    pipe.fit(X_train, y_train)
    preds = pipe.predict(X_test)

    mae = float(mean_absolute_error(y_test, preds))
    rmse = math.sqrt(float(mean_squared_error(y_test, preds)))
    r2 = float(r2_score(y_test, preds))

    os.makedirs(artifact_dir, exist_ok=True)
    artifact_path = os.path.join(artifact_dir, f"{model_name}.joblib")
    joblib.dump(pipe, artifact_path)

    meta = {
        "model_name": model_name,
        "feature_cols": FEATURE_COLS,
        "label_col": LABEL_COL,
        "train_rows": int(len(X_train)),
        "test_rows": int(len(X_test)),
        "mae": mae,
        "rmse": rmse,
        "r2": r2,
        "artifact_path": artifact_path,
    }
    with open(os.path.join(artifact_dir, f"{model_name}.json"), "w") as f:
        json.dump(meta, f, indent=2)

    logger.info("Trained %s on %d rows: mae=%.4f rmse=%.4f r2=%.4f", model_name, len(df), mae, rmse, r2)
    return meta


def main():
    """Load the configured seasons and train the win percentage model.

    Raises:
        LoadError: If a configured CSV file cannot be read.
        SystemExit: If there is not enough data to train.
    """
    settings = load_settings()
    configure_logging(settings.log_level)

    store = build_store(settings.datastore.files, directory=settings.datastore.filepath)
    meta = train_model(store.get_dataset())

    print("TRAINING COMPLETE")
    print(json.dumps(meta, indent=2))


if __name__ == "__main__":
    main()
