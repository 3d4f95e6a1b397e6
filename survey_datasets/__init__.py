"""Synthetic communication research survey datasets for teaching."""

from .data_generation import SurveyDataGenerator, write_csv, run

__version__ = "0.1.0"

__all__ = ["SurveyDataGenerator", "write_csv", "run"]
