"""
Template name constants.

Pure constants - no I/O or file system knowledge.
"""


class Template:
    """Template name constants. Use these instead of raw strings."""

    CLARIFYING_CONTEXT = "clarifying_context"
    HYPOTHESIS_CONTEXT = "hypothesis_context"
    FRAMEWORKS_CONTEXT = "frameworks_context"
    ANALYSIS_CONTEXT = "analysis_context"
    RECOMMENDATION_CONTEXT = "recommendation_context"
    SKILL_FEEDBACK = "skill_feedback"
