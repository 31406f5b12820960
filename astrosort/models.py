from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from pathlib import Path


class RoleLabel(Enum):
    LIGHT = "Light"
    DARK = "Dark"
    FLAT = "Flat"
    BIAS = "Bias"
    UNKNOWN = "Unknown"

    @classmethod
    def concrete(cls) -> list["RoleLabel"]:
        """Roles that get copied, in display order."""
        return [cls.LIGHT, cls.DARK, cls.FLAT, cls.BIAS]


@dataclass(frozen=True)
class CandidateFolder:
    path: Path
    age: timedelta  # time since last modification


@dataclass
class ClassifiedFolder:
    path: Path
    role: RoleLabel = RoleLabel.UNKNOWN

    @property
    def is_concrete(self) -> bool:
        return self.role is not RoleLabel.UNKNOWN


@dataclass
class ReorganizePlan:
    destination: Path  # base / "{object}-{capture}"
    folders: list[ClassifiedFolder] = field(default_factory=list)
