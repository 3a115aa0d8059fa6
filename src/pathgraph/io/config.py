# src/pathgraph/io/config.py
import os

from pathgraph.config.models import AStarModel


def load_config(path: str) -> AStarModel:
    path = os.path.expandvars(os.path.expanduser(path))
    with open(path, encoding="utf-8") as f:
        return AStarModel.model_validate_json(f.read())
