"""
Skill Profiles - Per-Category Behaviour Table

Every category-dependent decision (instructions, completion button labels,
exhibit pagination, which system-context template to render) is looked up
here instead of branching on category names throughout the code.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from .prompts.templates import Template
from ..domain.models import SkillCategory


@dataclass(frozen=True)
class SkillProfile:
    """
    Static behaviour for one SkillCategory.

    Attributes:
        category: The SkillCategory this profile describes.
        instructions: Text shown in the instructions panel.
        completion_label: Label of the completion action button.
        final_completion_label: Label used on the last exhibit (paginated skills only).
        completion_notice: Notice shown once the skill is completed.
        paginated: Exhibits are presented one at a time and the completion
            action walks through them.
        context_template: Template rendering the system-context message.
        feedback_focus: What the final feedback should evaluate.
    """
    category: SkillCategory
    instructions: str
    completion_label: str
    completion_notice: str
    context_template: str
    feedback_focus: str
    final_completion_label: Optional[str] = None
    paginated: bool = False

    def action_label(self, on_last_exhibit: bool) -> str:
        if self.paginated and on_last_exhibit and self.final_completion_label:
            return self.final_completion_label
        return self.completion_label


SKILL_PROFILES: Dict[SkillCategory, SkillProfile] = {
    SkillCategory.CLARIFYING: SkillProfile(
        category=SkillCategory.CLARIFYING,
        instructions=(
            "Read the prompt, then enter your clarifying questions one at a time. "
            "Press \"Send\" to submit. When satisfied, click the "
            "\"End Clarification Questions\" button in this panel."
        ),
        completion_label="End Clarification Questions",
        completion_notice="Clarifying questions ended.",
        context_template=Template.CLARIFYING_CONTEXT,
        feedback_focus="the relevance, structure and depth of the candidate's clarifying questions",
    ),
    SkillCategory.HYPOTHESIS: SkillProfile(
        category=SkillCategory.HYPOTHESIS,
        instructions=(
            "Formulate an initial hypothesis and what you'd like to investigate. "
            "CHIP will provide info. Refine up to 3 times. Click the "
            "\"End Hypothesis Formulation\" button in this panel when finished."
        ),
        completion_label="End Hypothesis Formulation",
        completion_notice="Hypothesis formulation ended.",
        context_template=Template.HYPOTHESIS_CONTEXT,
        feedback_focus="how testable the hypotheses were and how well they were refined with new information",
    ),
    SkillCategory.FRAMEWORKS: SkillProfile(
        category=SkillCategory.FRAMEWORKS,
        instructions=(
            "Outline your framework and proposed approach. When satisfied, press the "
            "\"Submit Framework\" button in this panel."
        ),
        completion_label="Submit Framework",
        completion_notice="Framework submitted.",
        context_template=Template.FRAMEWORKS_CONTEXT,
        feedback_focus="whether the framework is MECE, tailored to the case and prioritised",
    ),
    SkillCategory.ANALYSIS: SkillProfile(
        category=SkillCategory.ANALYSIS,
        instructions=(
            "Analyze the exhibit(s) and explain its significance. Enter your analysis "
            "and click \"Submit Analysis\". For multiple exhibits, you'll proceed "
            "sequentially until the final one."
        ),
        completion_label="Submit Analysis & Next Exhibit",
        final_completion_label="Submit Final Analysis",
        completion_notice="Analysis submitted.",
        context_template=Template.ANALYSIS_CONTEXT,
        feedback_focus="accuracy of the data reading, the 'so what' insight and the link back to the case question",
        paginated=True,
    ),
    SkillCategory.RECOMMENDATION: SkillProfile(
        category=SkillCategory.RECOMMENDATION,
        instructions=(
            "Review the case and findings, then structure your final recommendation "
            "(rationale, risks, next steps). Click the \"Submit Recommendation\" "
            "button in this panel."
        ),
        completion_label="Submit Recommendation",
        completion_notice="Recommendation submitted.",
        context_template=Template.RECOMMENDATION_CONTEXT,
        feedback_focus="a clear answer first, supporting rationale, risks and concrete next steps",
    ),
}


def get_profile(category: SkillCategory) -> SkillProfile:
    return SKILL_PROFILES[category]
