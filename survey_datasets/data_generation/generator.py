"""Main generator for the communication research survey datasets."""

import pandas as pd
from typing import Dict, Any, Optional, List, Union
import logging
from pathlib import Path

from ..utils.config import Config
from ..utils.distributions import DistributionSampler
from .datasets import (
    generate_media_trust_survey,
    generate_social_media_engagement,
    generate_communication_survey,
    generate_news_consumption_patterns,
)
from .schemas import (
    DATASET_NAMES,
    NEWS_CONSUMPTION_PATTERNS,
    PLATFORM_TYPES,
    ROW_UNITS,
)
from .validation import validate_dataset

logger = logging.getLogger(__name__)

DEFAULT_SEED = 2025

# Rows per dataset; participants for the news consumption panel
DEFAULT_SIZES = {
    'media_trust_survey': 250,
    'social_media_engagement': 300,
    'communication_survey': 50,
    'news_consumption_patterns': 75,
}

_GENERATORS = {
    'media_trust_survey': generate_media_trust_survey,
    'social_media_engagement': generate_social_media_engagement,
    'communication_survey': generate_communication_survey,
    'news_consumption_patterns': generate_news_consumption_patterns,
}


def write_csv(df: pd.DataFrame, path: Union[str, Path], encoding: str = 'utf-8') -> Path:
    """Write a table to a comma-separated file with a header row.

    The containing directory is created if it does not exist.

    Args:
        df: Table to write
        path: Destination file
        encoding: Text encoding

    Returns:
        Path of the written file

    Raises:
        OSError: If the directory cannot be created or the file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(path, index=False, encoding=encoding, lineterminator='\n')
    except OSError as e:
        logger.error(f"Failed to write {path}: {e}")
        raise

    logger.info(f"Saved {len(df)} rows to {path}")
    return path


class SurveyDataGenerator:
    """Generate the four communication research teaching datasets.

    The generator:
    1. Seeds a single distribution sampler
    2. Generates each dataset in a fixed order from that sampler
    3. Validates each table against its column schema
    4. Writes the tables to CSV files in the output directory
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None,
                 seed: Optional[int] = None):
        """Initialize the generator.

        Args:
            config_path: Path to configuration file
            seed: Random seed, overrides the configured seed
        """
        self.config = Config(config_path)
        self.seed = seed if seed is not None else self.config.get('seed', DEFAULT_SEED)
        self.sampler = DistributionSampler(seed=self.seed)

        logger.info(f"Initialized SurveyDataGenerator with seed={self.seed}")

    @property
    def output_dir(self) -> Path:
        """Configured output directory; relative paths are under the project root."""
        return self.config.get_path('output.directory', 'data')

    def expected_rows(self, name: str) -> int:
        """Number of rows the named dataset is configured to have."""
        if name == NEWS_CONSUMPTION_PATTERNS:
            return self._dataset_size(name) * len(PLATFORM_TYPES)
        return self._dataset_size(name)

    def generate_dataset(self, name: str, validate: bool = True) -> pd.DataFrame:
        """Generate one dataset from the shared sampler.

        Args:
            name: Dataset name
            validate: Whether to check the table against its schema

        Returns:
            Generated table

        Raises:
            ValueError: If the name is unknown or the table violates its schema
        """
        if name not in _GENERATORS:
            raise ValueError(f"Unknown dataset: {name}")

        size = self._dataset_size(name)
        id_width = self.config.get(f'datasets.{name}.id_width', 3)
        df = _GENERATORS[name](self.sampler, size, id_width)

        if validate:
            violations = validate_dataset(name, df, self.expected_rows(name), id_width)
            if violations:
                raise ValueError(
                    f"Generated {name} violates its schema: " + "; ".join(violations)
                )

        return df

    def generate_all(self) -> Dict[str, pd.DataFrame]:
        """Generate all datasets in their fixed order."""
        logger.info(f"Generating {len(DATASET_NAMES)} datasets")
        return {name: self.generate_dataset(name) for name in DATASET_NAMES}

    def save_all(self, datasets: Dict[str, pd.DataFrame],
                 output_dir: Optional[Union[str, Path]] = None) -> Dict[str, Path]:
        """Write each dataset to ``<output_dir>/<name>.csv``.

        Args:
            datasets: Tables keyed by dataset name
            output_dir: Destination directory (configured directory if None)

        Returns:
            Written paths keyed by dataset name
        """
        output_dir = Path(output_dir) if output_dir is not None else self.output_dir
        encoding = self.config.get('output.encoding', 'utf-8')

        paths = {}
        for name, df in datasets.items():
            paths[name] = write_csv(df, output_dir / f"{name}.csv", encoding=encoding)
        return paths

    @staticmethod
    def load_dataset(path: Union[str, Path]) -> pd.DataFrame:
        """Load a dataset written by ``save_all``.

        Args:
            path: CSV file path

        Returns:
            Loaded table
        """
        return pd.read_csv(Path(path), encoding='utf-8')

    @staticmethod
    def summarize(datasets: Dict[str, pd.DataFrame]) -> List[Dict[str, Any]]:
        """Row and column counts for each dataset."""
        return [
            {
                'file': f"{name}.csv",
                'rows': len(df),
                'columns': df.shape[1],
                'unit': ROW_UNITS.get(name, 'rows'),
            }
            for name, df in datasets.items()
        ]

    @staticmethod
    def format_summary(records: List[Dict[str, Any]], output_dir: Union[str, Path]) -> str:
        """Render the console report printed after a run."""
        lines = ["Sample datasets created successfully!", "", "Dataset Summary:"]
        for i, record in enumerate(records, start=1):
            lines.append(
                f"{i}. {record['file']}: {record['rows']} {record['unit']}, "
                f"{record['columns']} variables"
            )
        lines.append("")
        lines.append(f"All files saved to: {Path(output_dir).as_posix()}/")
        return "\n".join(lines)

    def _dataset_size(self, name: str) -> int:
        if name not in DEFAULT_SIZES:
            raise ValueError(f"Unknown dataset: {name}")
        key = 'n_participants' if name == NEWS_CONSUMPTION_PATTERNS else 'n_rows'
        return int(self.config.get(f'datasets.{name}.{key}', DEFAULT_SIZES[name]))


def run(config_path: Optional[Union[str, Path]] = None,
        output_dir: Optional[Union[str, Path]] = None) -> Dict[str, Path]:
    """Generate, validate and write every dataset, then print the summary.

    Args:
        config_path: Path to configuration file
        output_dir: Destination directory (configured directory if None)

    Returns:
        Written paths keyed by dataset name

    Raises:
        SystemExit: If a file cannot be written
    """
    generator = SurveyDataGenerator(config_path=config_path)
    datasets = generator.generate_all()

    output_dir = Path(output_dir) if output_dir is not None else generator.output_dir
    try:
        paths = generator.save_all(datasets, output_dir)
    except OSError as e:
        failed = e.filename or output_dir
        raise SystemExit(f"Failed to write {failed}: {e.strerror or e}") from e

    print(generator.format_summary(generator.summarize(datasets), output_dir))
    return paths
