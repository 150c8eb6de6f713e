from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Project:
    title: str
    description: str
    tech: Tuple[str, ...] = field(default_factory=tuple)


_DEFAULT_TECH = ("React", "TypeScript", "Tailwind")
_DESCRIPTION = "A brief description of this incredible project that showcases modern web development techniques."

# Seção "Selected Works" (lista fixa)
PROJECTS: Tuple[Project, ...] = tuple(
    Project(f"Amazing Project {n}", _DESCRIPTION, _DEFAULT_TECH) for n in (1, 2, 3)
)
