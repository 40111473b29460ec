"""
Skill Session - Practice State Machine

The SkillSession is the deterministic state machine that owns one practice
attempt: the chosen skill, the assigned prompt, the exhibit paginator and
the conversation ledger. All mutation goes through its transition methods.
-----------------------------------------------

Phases:
    IDLE -> LOADING -> ACTIVE <-> AWAITING_REPLY
                         |
                         v
                     COMPLETED  (left only by selecting a skill)

Every skill selection starts a new "generation". Replies are tagged with
the generation they were requested under, and a reply whose generation is
no longer current is dropped instead of being written into the new
attempt's ledger.

Nothing in here raises to the caller for expected failures. Missing prompts,
missing exhibits, corpus load errors and advisory failures all become
SessionNotices on the display surface, and the session stays usable.
"""

import logging
from typing import Callable, List, Optional

from ..config import settings
from ..domain.charts import ChartRenderer, NullChartRenderer, build_chart_spec
from ..domain.models import PromptRecord, SkillCategory
from ..llm.exceptions import AdvisoryGatewayError, AdvisoryMalformedError, AdvisoryTransportError
from ..llm.interface import AdvisoryGateway
from ..repositories.exceptions import PromptCorpusError
from ..repositories.prompts import PromptRepository
from ..state.ledger import ConversationLedger
from ..state.models import (
    CompletionAction,
    NoticeKind,
    SessionErrorCode,
    SessionNotice,
    SessionPhase,
    SkillSessionState,
)
from ..state.paginator import AdvanceResult, ExhibitPaginator
from .requests import build_advisory_request, build_feedback_request
from .skills import SkillProfile, get_profile

logger = logging.getLogger(__name__)

ReplyListener = Callable[[SkillSessionState], None]


class SkillSession:
    def __init__(
        self,
        repository: PromptRepository,
        gateway: AdvisoryGateway,
        chart_renderer: Optional[ChartRenderer] = None,
        nudge_threshold: int = settings.HYPOTHESIS_NUDGE_THRESHOLD,
    ):
        self.repository = repository
        self.gateway = gateway
        self.chart_renderer = chart_renderer or NullChartRenderer()
        self.nudge_threshold = nudge_threshold

        self.ledger = ConversationLedger()
        self.paginator = ExhibitPaginator()

        self.skill: Optional[SkillCategory] = None
        self.prompt: Optional[PromptRecord] = None
        self.phase = SessionPhase.IDLE
        self.generation = 0
        self.refinements = 0
        self.completed = False
        self.notices: List[SessionNotice] = []
        self.feedback: Optional[str] = None

        self._reply_listeners: List[ReplyListener] = []

    # ==========================================================================
    # Read Side
    # ==========================================================================

    @property
    def profile(self) -> Optional[SkillProfile]:
        return get_profile(self.skill) if self.skill else None

    @property
    def completion_action(self) -> Optional[CompletionAction]:
        """
        The completion action currently on offer, or None.

        Offered only while the attempt is ACTIVE with a prompt, so a reply in
        flight always lands before the attempt completes. For
        Hypothesis the 'nudge' flag is raised once the refinement threshold
        is reached; the user may keep refining regardless.
        """
        profile = self.profile
        if self.completed or self.prompt is None or profile is None:
            return None
        if self.phase != SessionPhase.ACTIVE:
            return None
        return CompletionAction(
            label=profile.action_label(self.paginator.is_last(self.prompt)),
            nudge=(
                self.skill == SkillCategory.HYPOTHESIS
                and self.refinements >= self.nudge_threshold
            ),
        )

    @property
    def state(self) -> SkillSessionState:
        profile = self.profile
        return SkillSessionState(
            skill=self.skill,
            phase=self.phase,
            generation=self.generation,
            prompt=self.prompt,
            exhibit_index=self.paginator.index,
            visible_exhibits=self.paginator.visible(
                self.prompt, profile.paginated if profile else False
            ),
            turns=list(self.ledger.snapshot()),
            refinements=self.refinements,
            completed=self.completed,
            completion_action=self.completion_action,
            instructions=profile.instructions if profile else None,
            notices=list(self.notices),
            feedback=self.feedback,
        )

    def add_reply_listener(self, listener: ReplyListener) -> None:
        """Registers a callback fired whenever a reply (or failure notice) lands."""
        self._reply_listeners.append(listener)

    # ==========================================================================
    # Transitions
    # ==========================================================================

    async def initialize(self, skill: Optional[SkillCategory] = None) -> SkillSessionState:
        """First load: fetch the corpus, then start the default skill."""
        return await self.reload_corpus(skill or SkillCategory(settings.DEFAULT_SKILL))

    async def reload_corpus(self, skill: Optional[SkillCategory] = None) -> SkillSessionState:
        """
        (Re)loads the prompt corpus and restarts the current skill.
        A failed load leaves every selection reporting NO_PROMPT_FOR_SKILL.
        """
        target = skill or self.skill or SkillCategory(settings.DEFAULT_SKILL)
        started_at = self.generation
        self.phase = SessionPhase.LOADING

        load_error: Optional[PromptCorpusError] = None
        try:
            await self.repository.load()
        except PromptCorpusError as e:
            logger.error(f"Could not load or parse prompts: {e}")
            load_error = e

        # A skill picked while the corpus was loading wins. Its attempt is kept
        # when it already has a prompt, otherwise it is retried on the new corpus.
        if self.generation != started_at and self.skill is not None:
            if self.prompt is None:
                self.select_skill(self.skill)
            else:
                logger.info(f"Keeping {self.skill.value} attempt started during reload")
        else:
            self.select_skill(target)

        if load_error is not None:
            self._add_notice(
                NoticeKind.ERROR,
                "Could not load practice cases. Please try reloading.",
                code=load_error.code.value,
            )
        return self.state

    def select_skill(self, category: SkillCategory) -> SkillSessionState:
        """
        Starts a fresh attempt for 'category'. Valid from any phase.
        """
        category = SkillCategory(category)
        profile = get_profile(category)

        self.generation += 1
        self.skill = category
        self.phase = SessionPhase.LOADING
        self.prompt = None
        self.ledger.clear()
        self.paginator.reset()
        self.refinements = 0
        self.completed = False
        self.notices = []
        self.feedback = None
        logger.info(f"Starting {category.value} attempt (generation {self.generation})")

        selected = self.repository.select_random(category)
        if selected is None:
            self.phase = SessionPhase.IDLE
            self._add_notice(
                NoticeKind.ERROR,
                f"No prompts found for {category.value}.",
                code=SessionErrorCode.NO_PROMPT_FOR_SKILL.value,
            )
            return self.state

        prompt = self.repository.find_by_id(selected.id)
        if prompt is None:
            self.phase = SessionPhase.IDLE
            self._add_notice(
                NoticeKind.ERROR,
                "Could not load details for the selected prompt.",
                code=SessionErrorCode.NO_ACTIVE_PROMPT.value,
            )
            return self.state

        self.prompt = prompt
        self.phase = SessionPhase.ACTIVE

        if profile.paginated and not prompt.has_exhibits:
            logger.warning(f"Prompt {prompt.id} has no exhibits for {category.value}")
            self._add_notice(
                NoticeKind.ERROR,
                "No exhibits found for this prompt.",
                code=SessionErrorCode.MISSING_EXHIBIT.value,
            )

        self._render_exhibits()
        return self.state

    async def submit_user_turn(self, text: str) -> bool:
        """
        Sends a user turn and waits for the advisory reply.

        Returns False (and changes nothing) when the text is blank or the
        session is not ACTIVE.
        """
        message = (text or "").strip()
        profile = self.profile
        if not message or self.phase != SessionPhase.ACTIVE or self.prompt is None or profile is None:
            return False

        history = self.ledger.snapshot()
        self.ledger.append("user", message)
        if self.skill == SkillCategory.HYPOTHESIS:
            self.refinements += 1
            logger.info(f"Hypothesis refinement count incremented to: {self.refinements}")

        request = build_advisory_request(
            profile=profile,
            prompt=self.prompt,
            exhibit=self.paginator.current(self.prompt) if profile.paginated else None,
            exhibit_index=self.paginator.index,
            history=history,
            latest_user_message=message,
        )

        generation = self.generation
        self.phase = SessionPhase.AWAITING_REPLY

        try:
            reply = await self.gateway.ask(request)
        except AdvisoryGatewayError as e:
            self._apply_failure(generation, e)
        except Exception as e:
            logger.exception("Unexpected error from advisory gateway")
            self._apply_failure(generation, AdvisoryTransportError(f"Advisory request failed: {e}"))
        else:
            self._apply_reply(generation, reply)
        return True

    def invoke_completion_action(self) -> bool:
        """
        Runs the skill's completion action.

        Analysis walks its exhibits first and only completes on the last one;
        every other skill completes immediately.
        """
        profile = self.profile
        if self.completion_action is None or profile is None:
            return False

        if profile.paginated:
            if self.paginator.advance(self.prompt) == AdvanceResult.CONTINUE:
                logger.info(f"Moving to exhibit {self.paginator.index + 1}")
                self._render_exhibits()
                return True

        self.completed = True
        self.phase = SessionPhase.COMPLETED
        logger.info(f"{profile.category.value} attempt completed (generation {self.generation})")
        self._add_notice(NoticeKind.INFO, profile.completion_notice)
        return True

    async def request_feedback(self) -> Optional[str]:
        """
        Asks the advisory service for end-of-skill feedback on the transcript.
        Only available once the attempt is COMPLETED.
        """
        profile = self.profile
        if self.phase != SessionPhase.COMPLETED or self.prompt is None or profile is None:
            return None
        if self.feedback is not None:
            return self.feedback
        if not len(self.ledger):
            self._add_notice(NoticeKind.INFO, "No interaction history found; nothing to give feedback on.")
            return None

        generation = self.generation
        request = build_feedback_request(profile, self.prompt, self.ledger.snapshot())
        try:
            feedback = await self.gateway.ask(request)
        except AdvisoryGatewayError as e:
            if generation == self.generation:
                logger.error(f"Feedback generation failed: {e}")
                self._add_notice(NoticeKind.ERROR, self._describe_failure(e), code=e.code.value)
            return None

        if generation != self.generation:
            logger.warning(f"Discarding stale feedback for generation {generation}")
            return None
        self.feedback = feedback
        return feedback

    # ==========================================================================
    # Reply Handling
    # ==========================================================================

    def _apply_reply(self, generation: int, reply: str) -> None:
        if generation != self.generation:
            logger.warning(
                f"Discarding stale reply for generation {generation} (current {self.generation})"
            )
            return
        self.ledger.append("assistant", reply)
        self._finish_waiting()

    def _apply_failure(self, generation: int, error: AdvisoryGatewayError) -> None:
        if generation != self.generation:
            logger.warning(
                f"Discarding stale failure for generation {generation} (current {self.generation})"
            )
            return
        logger.error(f"Advisory request failed: {error}")
        text = self._describe_failure(error)
        self.ledger.append("assistant", text)
        self._add_notice(NoticeKind.ERROR, text, code=error.code.value)
        self._finish_waiting()

    def _finish_waiting(self) -> None:
        if self.phase == SessionPhase.AWAITING_REPLY:
            self.phase = SessionPhase.ACTIVE
        snapshot = self.state
        for listener in self._reply_listeners:
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Reply listener failed")

    @staticmethod
    def _describe_failure(error: AdvisoryGatewayError) -> str:
        if isinstance(error, AdvisoryTransportError):
            status = f" (status {error.status_code})" if error.status_code else ""
            detail = f": {error.body[: settings.RAW_PREVIEW_CHARS]}" if error.body else ""
            return f"Sorry, an error occurred contacting CHIP{status}{detail}. Please try again."
        if isinstance(error, AdvisoryMalformedError):
            return f"CHIP sent an unexpected response: {error.raw_preview or '[empty]'}"
        return f"Sorry, an error occurred ({type(error).__name__}). Please try again."

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _add_notice(self, kind: NoticeKind, text: str, code: Optional[str] = None) -> None:
        self.notices.append(SessionNotice(kind=kind, text=text, code=code))

    def _render_exhibits(self) -> None:
        profile = self.profile
        if profile is None or self.prompt is None:
            return
        offset = self.paginator.index if profile.paginated else 0
        for position, exhibit in enumerate(self.paginator.visible(self.prompt, profile.paginated)):
            spec = build_chart_spec(exhibit)
            if spec is None:
                continue
            try:
                self.chart_renderer.render(offset + position + 1, spec)
            except Exception as e:
                logger.warning(f"Error rendering chart for exhibit {offset + position + 1}: {e}")
