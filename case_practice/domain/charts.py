"""
Chart Descriptions for Exhibits.

Translates an ExhibitRecord into a declarative, Plotly-style figure
description ({"data": [...traces], "layout": {...}}). Rendering itself is
delegated to a ChartRenderer supplied by the front end.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from .models import ChartKind, ExhibitRecord

logger = logging.getLogger(__name__)

PIE_HOLE = 0.4


class ChartRenderer(ABC):
    """
    Port for whatever draws charts (browser Plotly, a notebook, a PNG exporter).
    Implementations may raise; callers treat rendering failures as cosmetic.
    """

    @abstractmethod
    def render(self, exhibit_number: int, spec: Dict[str, Any]) -> None:
        pass


class NullChartRenderer(ChartRenderer):
    """Discards chart descriptions. Used when no front end is attached."""

    def render(self, exhibit_number: int, spec: Dict[str, Any]) -> None:
        return None


def build_chart_spec(exhibit: ExhibitRecord) -> Optional[Dict[str, Any]]:
    """
    Build the figure description for a bar, line or pie exhibit.

    Returns None for tables, narrative exhibits, and charts whose referenced
    columns are missing from the exhibit data.
    """
    if exhibit.chart_type in (ChartKind.BAR, ChartKind.LINE):
        traces = _xy_traces(exhibit)
    elif exhibit.chart_type == ChartKind.PIE:
        traces = _pie_traces(exhibit)
    else:
        return None

    if not traces:
        logger.warning(
            f"Chart data for '{exhibit.exhibit_title}' ({exhibit.chart_type.value}) is misconfigured or missing."
        )
        return None

    layout: Dict[str, Any] = {
        "title": {"text": exhibit.exhibit_title},
        "xaxis": {"title": {"text": exhibit.x_axis or ""}},
        "yaxis": {"title": {"text": ", ".join(exhibit.y_columns)}},
    }
    if exhibit.chart_type == ChartKind.BAR:
        layout["barmode"] = "group"
    if exhibit.chart_type == ChartKind.PIE:
        layout["showlegend"] = True

    return {"data": traces, "layout": layout}


def _xy_traces(exhibit: ExhibitRecord) -> List[Dict[str, Any]]:
    if not exhibit.x_axis or exhibit.x_axis not in exhibit.data:
        return []
    x_values = exhibit.data[exhibit.x_axis]
    traces = []
    for column in exhibit.y_columns:
        if column not in exhibit.data:
            logger.warning(f"Series '{column}' not found in exhibit '{exhibit.exhibit_title}'.")
            continue
        if exhibit.chart_type == ChartKind.BAR:
            traces.append({"type": "bar", "name": column, "x": x_values, "y": exhibit.data[column]})
        else:
            traces.append({
                "type": "scatter",
                "mode": "lines+markers",
                "name": column,
                "x": x_values,
                "y": exhibit.data[column],
            })
    return traces


def _pie_traces(exhibit: ExhibitRecord) -> List[Dict[str, Any]]:
    labels = exhibit.data.get(exhibit.names or "")
    values = exhibit.data.get(exhibit.values or "")
    if labels is None or values is None:
        return []
    return [{"type": "pie", "labels": labels, "values": values, "hole": PIE_HOLE}]
