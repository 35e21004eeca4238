from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from portfolio_ui.components.project_info import ProjectInfo, ProjectRegistry

logger = logging.getLogger(__name__)

DEFAULT_PROJECTS: dict[str, ProjectInfo] = {
    "project1": ProjectInfo(
        title="E-Commerce Platform",
        description="Full-stack online shopping platform with payment integration, user authentication, and admin dashboard.",
        tech=("React", "Node.js", "MongoDB", "Stripe"),
        live_url="https://example.com",
        source_url="https://github.com/username/project1",
    ),
    "project2": ProjectInfo(
        title="Weather Dashboard",
        description="Real-time weather application with geolocation, forecasts, and interactive maps.",
        tech=("Vue.js", "API Integration", "Chart.js"),
        live_url="https://example.com",
        source_url="https://github.com/username/project2",
    ),
    "project3": ProjectInfo(
        title="Task Management App",
        description="Collaborative project management tool with real-time updates, file sharing, and team chat.",
        tech=("Angular", "Firebase", "WebSocket"),
        live_url="https://example.com",
        source_url="https://github.com/username/project3",
    ),
    "project4": ProjectInfo(
        title="AI Image Generator",
        description="Machine learning powered image generation tool with custom training models.",
        tech=("Python", "TensorFlow", "Flask", "AWS"),
        live_url="https://example.com",
        source_url="https://github.com/username/project4",
    ),
    "project5": ProjectInfo(
        title="Social Media Analytics",
        description="Data visualization platform for social media metrics with predictive analytics.",
        tech=("D3.js", "Python", "PostgreSQL", "Docker"),
        live_url="https://example.com",
        source_url="https://github.com/username/project5",
    ),
}


def create_default_project_registry() -> ProjectRegistry:
    return ProjectRegistry(projects=dict(DEFAULT_PROJECTS))


def project_from_mapping(data: Mapping[str, Any]) -> ProjectInfo:
    """Build a ProjectInfo from a JSON object.

    Accepts both ``source_url`` and the older ``githubUrl``/``liveUrl`` keys.
    """
    title = data.get("title")
    if not isinstance(title, str) or not title:
        raise ValueError("project entry requires a non-empty 'title'")
    description = data.get("description") or ""
    tech = data.get("tech") or ()
    if isinstance(tech, str):
        tech = (tech,)
    live_url = data.get("live_url", data.get("liveUrl"))
    source_url = data.get("source_url", data.get("githubUrl"))
    return ProjectInfo(
        title=title,
        description=str(description),
        tech=tuple(str(item) for item in tech),
        live_url=live_url or None,
        source_url=source_url or None,
    )


def load_project_registry(path: str | Path) -> ProjectRegistry:
    """Load a ``{project_id: {...}}`` JSON catalogue.

    Malformed entries are skipped with a warning so one bad record does not
    take the whole catalogue down.
    """
    with open(path, "r", encoding="utf-8") as handle:
        raw = json.load(handle)
    if not isinstance(raw, dict):
        raise ValueError(f"project catalogue {path} must be a JSON object")
    projects: dict[str, ProjectInfo] = {}
    for project_id, entry in raw.items():
        if not isinstance(entry, dict):
            logger.warning("Skipping project %r: entry is not an object", project_id)
            continue
        try:
            projects[str(project_id)] = project_from_mapping(entry)
        except ValueError as exc:
            logger.warning("Skipping project %r: %s", project_id, exc)
    logger.info("Loaded %d projects from %s", len(projects), path)
    return ProjectRegistry(projects=projects)
