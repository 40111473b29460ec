"""
Domain Layer - Static Data Models

This module defines the core domain model representing the practice corpus:
Prompts (case descriptions) and the Exhibits (tables and charts) attached to
them. These models are parsed from the prompt corpus JSON and are immutable
once loaded.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SkillCategory(str, Enum):
    """
    The five fixed practice modes. Values match the corpus 'skill_type' field.
    """
    CLARIFYING = "Clarifying"
    HYPOTHESIS = "Hypothesis"
    FRAMEWORKS = "Frameworks"
    ANALYSIS = "Analysis"
    RECOMMENDATION = "Recommendation"


class ChartKind(str, Enum):
    """
    How an exhibit's data is presented.

    - table: Column-oriented data rendered as rows
    - bar / line: x_axis column against one or more y_axis columns
    - pie: 'names' column against a 'values' column
    - none: No chart; the exhibit is narrative (summary_text) only
    """
    TABLE = "table"
    BAR = "bar"
    LINE = "line"
    PIE = "pie"
    NONE = "none"


class ExhibitRecord(BaseModel):
    """
    A titled data artifact attached to a prompt.

    Attributes:
        exhibit_title: Heading shown above the exhibit.
        description: Optional caption.
        chart_type: ChartKind. Unknown corpus values collapse to NONE.
        data: Mapping of column / series name to its ordered values.
        x_axis: Column used for the x axis (bar, line).
        y_axis: Column or columns plotted against x_axis (bar, line).
        names: Column holding slice labels (pie).
        values: Column holding slice sizes (pie).
        summary_text: Narrative findings, a paragraph or a list of bullets.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    exhibit_title: str = ""
    description: Optional[str] = None
    chart_type: ChartKind = ChartKind.NONE
    data: Dict[str, List[Any]] = Field(default_factory=dict)
    x_axis: Optional[str] = None
    y_axis: Optional[Union[str, List[str]]] = None
    names: Optional[str] = None
    values: Optional[str] = None
    summary_text: Optional[Union[str, List[str]]] = None

    @field_validator("chart_type", mode="before")
    @classmethod
    def _coerce_chart_type(cls, value: Any) -> Any:
        if value is None:
            return ChartKind.NONE
        try:
            return ChartKind(str(value).lower())
        except ValueError:
            return ChartKind.NONE

    @field_validator("data", mode="before")
    @classmethod
    def _default_data(cls, value: Any) -> Any:
        return value if value is not None else {}

    @property
    def y_columns(self) -> List[str]:
        if self.y_axis is None:
            return []
        if isinstance(self.y_axis, str):
            return [self.y_axis]
        return list(self.y_axis)

    @property
    def summary_lines(self) -> List[str]:
        if self.summary_text is None:
            return []
        if isinstance(self.summary_text, str):
            return [self.summary_text]
        return list(self.summary_text)


class PromptRecord(BaseModel):
    """
    A single practice case.

    Attributes:
        id: Unique identifier within the corpus.
        skill_type: SkillCategory this prompt is written for.
        title: Case headline.
        prompt_text: Full case body. Paragraphs are separated by blank lines.
        exhibits: Ordered exhibits, possibly empty.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    skill_type: SkillCategory
    title: str = ""
    prompt_text: str = ""
    exhibits: List[ExhibitRecord] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        # Corpus ids are sometimes numeric
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("exhibits", mode="before")
    @classmethod
    def _default_exhibits(cls, value: Any) -> Any:
        return value if value is not None else []

    @property
    def has_exhibits(self) -> bool:
        return bool(self.exhibits)
