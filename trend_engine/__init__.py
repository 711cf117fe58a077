"""LinkedCraft trend engine.

Turns a random seed profile's skills into LinkedIn topic suggestions, with a
six-hour snapshot cache in front of the upstream and LLM calls.
"""

from .config import Settings
from .models import RawSkill, Topic, TrendResponse, TrendSnapshot

__all__ = [
    "RawSkill",
    "Settings",
    "Topic",
    "TrendResponse",
    "TrendSnapshot",
]

__version__ = "0.1.0"
