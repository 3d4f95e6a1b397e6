#!/usr/bin/env python3
"""
Simple example for visualizing the generated survey datasets.

Plots the age/trust relationship from the media trust survey, the skewed
follower counts from the social media data and weekly hours per platform
type from the news consumption panel.
"""

import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path

from survey_datasets import SurveyDataGenerator


def simple_visualization_example(save_path='survey_overview.png'):
    """Generate the datasets and save a three-panel overview figure."""

    print("Generating survey datasets...")
    generator = SurveyDataGenerator(seed=2025)
    datasets = generator.generate_all()

    media = datasets['media_trust_survey']
    social = datasets['social_media_engagement']
    news = datasets['news_consumption_patterns']

    fig, axes = plt.subplots(1, 3, figsize=(16, 5))

    # Trust rises with age
    ax = axes[0]
    ax.scatter(media['age'], media['trust_score'], alpha=0.5, s=15)
    slope, intercept = np.polyfit(media['age'], media['trust_score'], 1)
    ages = np.array([media['age'].min(), media['age'].max()])
    ax.plot(ages, intercept + slope * ages, color='red')
    r = np.corrcoef(media['age'], media['trust_score'])[0, 1]
    ax.set_title(f'Trust score by age (r = {r:.2f})')
    ax.set_xlabel('Age')
    ax.set_ylabel('Trust score (1-7)')

    # Follower counts are log-uniform
    ax = axes[1]
    ax.hist(np.log10(social['follower_count']), bins=20, alpha=0.7, edgecolor='black')
    ax.set_title('Follower count')
    ax.set_xlabel('log10(followers)')
    ax.set_ylabel('Users')

    # Weekly hours per platform type
    ax = axes[2]
    platforms = list(news['platform_type'].unique())
    ax.boxplot([news.loc[news['platform_type'] == p, 'weekly_hours'] for p in platforms])
    ax.set_xticks(range(1, len(platforms) + 1))
    ax.set_xticklabels(platforms)
    ax.set_title('Weekly hours by platform type')
    ax.set_ylabel('Hours per week')

    plt.suptitle('Generated Survey Datasets')
    plt.tight_layout()

    save_path = Path(save_path)
    plt.savefig(save_path, dpi=100, bbox_inches='tight')
    print(f"Saved visualization to {save_path}")
    plt.close()


if __name__ == "__main__":
    simple_visualization_example()
