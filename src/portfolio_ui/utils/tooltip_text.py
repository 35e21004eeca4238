from __future__ import annotations

import textwrap

from portfolio_ui.components.project_info import ProjectInfo
from portfolio_ui.components.tooltip_state import TooltipContent
from portfolio_ui.config import TooltipConfig


def build_tooltip_content(project: ProjectInfo, config: TooltipConfig) -> TooltipContent:
    segments = project.description.split("\n") if project.description else []
    wrapped: list[str] = []
    for segment in segments:
        stripped = segment.strip()
        if not stripped:
            wrapped.append("")
            continue
        wrapped.extend(textwrap.wrap(stripped, width=config.wrap_chars))
    return TooltipContent(
        title=project.title,
        description=project.description,
        tech=tuple(project.tech),
        live_url=project.live_url or None,
        source_url=project.source_url or None,
        description_lines=tuple(wrapped),
    )


def measure_tooltip(content: TooltipContent, config: TooltipConfig) -> tuple[float, float]:
    """Estimate the rendered box size from character counts."""
    max_chars = max([len(content.title)] + [len(line) for line in content.description_lines])
    tag_chars = sum(len(tag) + 2 for tag in content.tech)
    text_width = max(max_chars, min(tag_chars, config.wrap_chars)) * config.char_width
    width = max(config.min_width, config.padding * 2 + text_width)
    height = config.padding * 2 + config.title_height
    height += config.line_height * len(content.description_lines)
    if content.tech:
        height += config.tag_row_height
    if content.show_live_link or content.show_source_link:
        height += config.link_row_height
    return width, height
