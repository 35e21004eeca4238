from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(slots=True, frozen=True)
class ProjectInfo:
    title: str
    description: str
    tech: Tuple[str, ...] = ()
    live_url: Optional[str] = None
    source_url: Optional[str] = None


@dataclass(slots=True)
class ProjectRegistry:
    """Singleton component mapping project ids to their tooltip data."""

    projects: Dict[str, ProjectInfo] = field(default_factory=dict)

    def lookup(self, project_id: str) -> ProjectInfo | None:
        return self.projects.get(project_id)

    def __contains__(self, project_id: object) -> bool:
        return project_id in self.projects

    def __len__(self) -> int:
        return len(self.projects)
