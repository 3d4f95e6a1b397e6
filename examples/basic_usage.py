"""Basic usage examples for the survey datasets."""

import numpy as np
from pathlib import Path
import tempfile

from survey_datasets import SurveyDataGenerator


def example_basic_generation():
    """Example of generating a single dataset."""
    print("=" * 50)
    print("BASIC DATASET GENERATION")
    print("=" * 50)

    generator = SurveyDataGenerator(seed=2025)
    df = generator.generate_dataset('media_trust_survey')

    print(df.head())
    print(f"\nShape: {df.shape}")
    r = np.corrcoef(df['age'], df['trust_score'])[0, 1]
    print(f"Correlation between age and trust score: {r:.2f}")

    return df


def example_panel_dataset():
    """Example showing the repeated-measures news consumption data."""
    print("\n" + "=" * 50)
    print("NEWS CONSUMPTION PANEL")
    print("=" * 50)

    generator = SurveyDataGenerator(seed=2025)
    df = generator.generate_dataset('news_consumption_patterns')

    print(df.head(8))
    print("\nMean weekly hours by platform type:")
    print(df.groupby('platform_type')['weekly_hours'].mean().round(2))

    return df


def example_save_load():
    """Example of writing all datasets and reading one back."""
    print("\n" + "=" * 50)
    print("SAVE AND LOAD DATASETS")
    print("=" * 50)

    generator = SurveyDataGenerator(seed=2025)
    datasets = generator.generate_all()

    with tempfile.TemporaryDirectory() as tmp:
        paths = generator.save_all(datasets, Path(tmp) / 'data')
        print(generator.format_summary(generator.summarize(datasets), Path(tmp) / 'data'))

        loaded = SurveyDataGenerator.load_dataset(paths['social_media_engagement'])
        assert loaded.shape == datasets['social_media_engagement'].shape
        print("\n✓ Loaded dataset matches original shape")

    return datasets


def main():
    """Run all examples."""
    print("\n📊 COMMUNICATION RESEARCH SURVEY DATASETS\n")

    example_basic_generation()
    example_panel_dataset()
    example_save_load()

    print("\n✅ All examples completed successfully!")


if __name__ == "__main__":
    main()
