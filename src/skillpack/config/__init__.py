"""Configuration loading for skillpack."""

from .loader import default_repo_root, load_config
from .model import SkillpackConfig, ValidationPolicy

__all__ = ["SkillpackConfig", "ValidationPolicy", "default_repo_root", "load_config"]
