"""Serialization helpers."""

from .json import load_run_json, run_from_json, run_to_json, save_run_json

__all__ = ["load_run_json", "run_from_json", "run_to_json", "save_run_json"]
