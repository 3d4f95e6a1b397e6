"""Schema checks for generated survey datasets."""

import re
import pandas as pd
from typing import List, Optional
import logging

from .schemas import NEWS_CONSUMPTION_PATTERNS, PLATFORM_TYPES, get_schema

logger = logging.getLogger(__name__)


def validate_dataset(name: str, df: pd.DataFrame,
                     expected_rows: Optional[int] = None,
                     id_width: int = 3) -> List[str]:
    """Check a generated table against its column schema.

    Checks:
    - Row count (when ``expected_rows`` is given)
    - Column names and order
    - Numeric ranges and non-negative counts
    - Categorical membership
    - Identifier format and uniqueness
    - Per-participant consistency of the news consumption panel

    Args:
        name: Dataset name
        df: Generated table
        expected_rows: Required number of rows
        id_width: Zero-padding width of identifiers

    Returns:
        List of human readable violations, empty if the table is valid
    """
    schema = get_schema(name)
    violations = []

    if expected_rows is not None and len(df) != expected_rows:
        violations.append(f"expected {expected_rows} rows, got {len(df)}")

    if list(df.columns) != list(schema.keys()):
        violations.append(
            f"expected columns {list(schema.keys())}, got {list(df.columns)}"
        )
        # Column level checks need the declared columns
        return violations

    for column, spec in schema.items():
        values = df[column]
        kind = spec['kind']

        if values.isna().any():
            violations.append(f"{column}: contains missing values")
            continue

        if kind in ('integer', 'float'):
            low, high = spec['range']
            n_out = int(((values < low) | (values > high)).sum())
            if n_out:
                violations.append(f"{column}: {n_out} values outside [{low}, {high}]")
        elif kind == 'count':
            n_negative = int((values < 0).sum())
            if n_negative:
                violations.append(f"{column}: {n_negative} negative counts")
        elif kind == 'categorical':
            unexpected = sorted(set(values) - set(spec['values']), key=str)
            if unexpected:
                violations.append(f"{column}: unexpected values {unexpected}")
        elif kind == 'id':
            pattern = rf"^{re.escape(spec['prefix'])}\d{{{id_width},}}$"
            n_bad = int((~values.astype(str).str.match(pattern)).sum())
            if n_bad:
                violations.append(f"{column}: {n_bad} malformed identifiers")
            if name != NEWS_CONSUMPTION_PATTERNS and values.duplicated().any():
                violations.append(f"{column}: duplicate identifiers")

    if name == NEWS_CONSUMPTION_PATTERNS:
        violations.extend(_check_panel(df))

    if violations:
        logger.warning(f"{name}: {len(violations)} schema violations")
    return violations


def _check_panel(df: pd.DataFrame) -> List[str]:
    """Check that every participant has one row per platform type and
    constant age group and education level."""
    violations = []
    grouped = df.groupby('participant_id', sort=False)

    for column in ('age_group', 'education_level'):
        n_varying = int((grouped[column].nunique() > 1).sum())
        if n_varying:
            violations.append(f"{column}: varies within {n_varying} participants")

    expected_platforms = sorted(PLATFORM_TYPES)
    n_incomplete = sum(
        1 for _, platforms in grouped['platform_type']
        if sorted(platforms) != expected_platforms
    )
    if n_incomplete:
        violations.append(
            f"platform_type: {n_incomplete} participants without exactly one row per platform"
        )

    return violations
