"""Utility modules for survey dataset generation"""

from .config import Config
from .distributions import DistributionSampler

__all__ = ["Config", "DistributionSampler"]
