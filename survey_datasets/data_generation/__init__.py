"""Data generation module"""

from .generator import SurveyDataGenerator, write_csv, run
from .datasets import (
    generate_media_trust_survey,
    generate_social_media_engagement,
    generate_communication_survey,
    generate_news_consumption_patterns,
)
from .validation import validate_dataset

__all__ = [
    "SurveyDataGenerator",
    "write_csv",
    "run",
    "generate_media_trust_survey",
    "generate_social_media_engagement",
    "generate_communication_survey",
    "generate_news_consumption_patterns",
    "validate_dataset",
]
