"""
Domain Layer - Static Data Models

Defines the practice corpus model: Prompts, their Exhibits, and the
declarative chart descriptions built from them.
"""

from case_practice.domain.models import (
    ChartKind,
    ExhibitRecord,
    PromptRecord,
    SkillCategory,
)
from case_practice.domain.charts import (
    ChartRenderer,
    NullChartRenderer,
    build_chart_spec,
)

__all__ = [
    "ChartKind",
    "ExhibitRecord",
    "PromptRecord",
    "SkillCategory",
    "ChartRenderer",
    "NullChartRenderer",
    "build_chart_spec",
]
