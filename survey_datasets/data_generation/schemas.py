"""Column schemas for the survey datasets.

Each schema maps a column name to a specification dict. The key ``kind``
is one of:

- ``id``: zero-padded identifier with a fixed ``prefix``
- ``integer`` / ``float``: bounded numeric column with ``range`` (inclusive)
- ``count``: non-negative integer column with no upper bound
- ``categorical``: one of ``values``, optionally drawn with ``probabilities``

Generation draws from these specifications and validation checks tables
against them, so the column order here is the column order of the CSV files.
"""

from typing import Dict, Any, List

MEDIA_TRUST_SURVEY = 'media_trust_survey'
SOCIAL_MEDIA_ENGAGEMENT = 'social_media_engagement'
COMMUNICATION_SURVEY = 'communication_survey'
NEWS_CONSUMPTION_PATTERNS = 'news_consumption_patterns'

DATASET_NAMES = [
    MEDIA_TRUST_SURVEY,
    SOCIAL_MEDIA_ENGAGEMENT,
    COMMUNICATION_SURVEY,
    NEWS_CONSUMPTION_PATTERNS,
]

PLATFORM_TYPES = ['TV News', 'Social Media', 'Print Media', 'Podcasts']

SCHEMAS: Dict[str, Dict[str, Dict[str, Any]]] = {
    MEDIA_TRUST_SURVEY: {
        'participant_id': {'kind': 'id', 'prefix': 'P'},
        'age': {'kind': 'integer', 'range': (18, 75)},
        'gender': {
            'kind': 'categorical',
            'values': ['Male', 'Female', 'Non-binary', 'Prefer not to say'],
            'probabilities': [0.45, 0.45, 0.05, 0.05],
        },
        'education': {
            'kind': 'categorical',
            'values': ['High School', 'Some College', "Bachelor's", "Master's", 'PhD'],
            'probabilities': [0.15, 0.25, 0.35, 0.20, 0.05],
        },
        'news_source': {
            'kind': 'categorical',
            'values': ['Television', 'Newspapers', 'Facebook', 'Instagram',
                       'Twitter', 'YouTube', 'Podcasts', 'Online News Sites'],
        },
        'daily_news_minutes': {'kind': 'integer', 'range': (5, 180)},
        'political_interest': {
            'kind': 'categorical',
            'values': [1, 2, 3, 4, 5, 6, 7],
            'probabilities': [0.05, 0.08, 0.12, 0.25, 0.25, 0.15, 0.10],
        },
        'income_bracket': {
            'kind': 'categorical',
            'values': ['Under $25k', '$25k-$50k', '$50k-$75k', '$75k-$100k', 'Over $100k'],
        },
        'trust_score': {'kind': 'float', 'range': (1.0, 7.0)},
        'credibility_rating': {'kind': 'float', 'range': (1.0, 7.0)},
    },
    SOCIAL_MEDIA_ENGAGEMENT: {
        'user_id': {'kind': 'id', 'prefix': 'U'},
        'age': {'kind': 'integer', 'range': (16, 65)},
        'platform': {
            'kind': 'categorical',
            'values': ['Facebook', 'Instagram', 'Twitter', 'TikTok', 'YouTube', 'LinkedIn'],
            'probabilities': [0.25, 0.25, 0.15, 0.20, 0.10, 0.05],
        },
        'daily_hours': {'kind': 'float', 'range': (0.1, 8.0)},
        'posts_per_week': {'kind': 'count', 'mean': 4.0},
        'engagement_score': {'kind': 'float', 'range': (0.0, 100.0)},
        # 10 ** [1, 4.5], rounded to whole followers
        'follower_count': {'kind': 'integer', 'range': (10, 31623)},
        'political_posts_week': {'kind': 'count', 'mean': 1.5},
        'news_sharing_frequency': {
            'kind': 'categorical',
            'values': [1, 2, 3, 4, 5],
            'probabilities': [0.30, 0.25, 0.25, 0.15, 0.05],
        },
        'platform_satisfaction': {
            'kind': 'categorical',
            'values': [1, 2, 3, 4, 5, 6, 7],
            'probabilities': [0.05, 0.10, 0.15, 0.25, 0.25, 0.15, 0.05],
        },
    },
    COMMUNICATION_SURVEY: {
        'id': {'kind': 'id', 'prefix': 'P'},
        'age': {'kind': 'integer', 'range': (18, 35)},
        'media_trust': {'kind': 'float', 'range': (1.0, 7.0)},
        'platform': {
            'kind': 'categorical',
            'values': ['Instagram', 'Facebook', 'TikTok', 'Twitter'],
        },
        'daily_use_hours': {'kind': 'float', 'range': (0.5, 6.0)},
    },
    NEWS_CONSUMPTION_PATTERNS: {
        'participant_id': {'kind': 'id', 'prefix': 'P'},
        'platform_type': {'kind': 'categorical', 'values': PLATFORM_TYPES},
        'weekly_hours': {'kind': 'float', 'range': (0.0, 15.0)},
        'trust_level': {'kind': 'integer', 'range': (1, 7)},
        'age_group': {
            'kind': 'categorical',
            'values': ['18-29', '30-44', '45-59', '60+'],
        },
        'education_level': {
            'kind': 'categorical',
            'values': ['High School', 'College', 'Graduate'],
        },
    },
}

# Unit noun used when reporting row counts
ROW_UNITS = {
    MEDIA_TRUST_SURVEY: 'participants',
    SOCIAL_MEDIA_ENGAGEMENT: 'users',
    COMMUNICATION_SURVEY: 'participants',
    NEWS_CONSUMPTION_PATTERNS: 'observations',
}


def get_schema(name: str) -> Dict[str, Dict[str, Any]]:
    """Return the column schema for a dataset.

    Raises:
        ValueError: If the dataset name is unknown
    """
    if name not in SCHEMAS:
        raise ValueError(f"Unknown dataset: {name}")
    return SCHEMAS[name]


def column_names(name: str) -> List[str]:
    return list(get_schema(name).keys())


def format_ids(prefix: str, n: int, width: int = 3) -> List[str]:
    """Build zero-padded identifiers ``prefix001``..``prefixNNN``."""
    return [f"{prefix}{i:0{width}d}" for i in range(1, n + 1)]
