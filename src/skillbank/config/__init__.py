"""Configuration for skillbank.

Main exports:
- LoggingConfig: Logging configuration
- SkillConfig: Skill discovery configuration
"""

from skillbank.config.logging_config import LoggingConfig
from skillbank.skills.config import SkillConfig

__all__ = [
    "LoggingConfig",
    "SkillConfig",
]
