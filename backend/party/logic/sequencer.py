"""
Session state machine: NOT_STARTED -> ROUND_IN_PROGRESS(i) -> ... -> COMPLETED.

A diagnosis session plays a queue of rounds built from the catalog and
classifies every joined player when the last round completes. A free-play
session wraps one selected round and ends without classification.

Transitions happen only in start(), complete_round() and abandon(). Rounds
are never skipped, repeated or reordered.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from party.logic.accumulator import apply_round_result, normalized_totals
from party.logic.classifier import classify
from party.logic.enums import SessionMode, SessionPhase
from party.logic.exceptions import ConfigurationError, InvalidSessionStateError
from party.logic.queue_builder import build_diagnosis_queue
from party.logic.ranking import compute_round_points
from party.logic.rng import create_queue_rng
from party.logic.settings import DiagnosisSettings, validate_settings
from party.logic.types import PlayerSummary

if TYPE_CHECKING:
    import random
    from collections.abc import Sequence

    from party.logic.points import PointsTable
    from party.logic.roster import PartyPlayer, Roster
    from party.logic.types import RawScore, RoundDescriptor

logger = structlog.get_logger()


class SessionSequencer:
    """Drive one session at a time over a roster's joined players."""

    def __init__(self, settings: DiagnosisSettings | None = None) -> None:
        self._settings = settings or DiagnosisSettings()
        validate_settings(self._settings)
        self._phase = SessionPhase.NOT_STARTED
        self._mode: SessionMode | None = None
        self._roster: Roster | None = None
        self._players: list[PartyPlayer] = []
        self._queue: list[RoundDescriptor] = []
        self._index = 0

    @property
    def settings(self) -> DiagnosisSettings:
        return self._settings

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def mode(self) -> SessionMode | None:
        return self._mode

    @property
    def players(self) -> list[PartyPlayer]:
        return list(self._players)

    @property
    def queue(self) -> tuple[RoundDescriptor, ...]:
        return tuple(self._queue)

    @property
    def round_index(self) -> int:
        return self._index

    @property
    def round_count(self) -> int:
        return len(self._queue)

    def is_complete(self) -> bool:
        return self._phase == SessionPhase.COMPLETED

    def start(
        self,
        mode: SessionMode,
        roster: Roster,
        catalog: Sequence[RoundDescriptor],
        *,
        selected_reference: str | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """
        Start a session over the roster's joined players.

        Diagnosis builds a randomized queue from the catalog; free-play looks
        up selected_reference in the catalog. Every roster player's totals and
        round fields are reset, including players who did not join. Raises
        ConfigurationError when there are no joined players, the queue is empty,
        or the selection does not resolve.
        """
        players = roster.joined_players()
        if not players:
            raise ConfigurationError("cannot start a session with no joined players")

        if mode == SessionMode.DIAGNOSIS:
            queue = build_diagnosis_queue(
                catalog,
                self._settings.per_category_count,
                rng if rng is not None else create_queue_rng(None),
            )
            if not queue:
                logger.error("no rounds available for diagnosis", catalog_size=len(catalog))
                raise ConfigurationError("diagnosis queue is empty")
        else:
            if not selected_reference:
                raise ConfigurationError("free-play session needs a selected round")
            selection = next((d for d in catalog if d.reference == selected_reference), None)
            if selection is None:
                logger.error("free-play round not in catalog", reference=selected_reference)
                raise ConfigurationError(f"round {selected_reference!r} not found in catalog")
            queue = [selection]

        for player in roster.players:
            player.reset_for_new_session()

        self._mode = mode
        self._roster = roster
        self._players = players
        self._queue = queue
        self._index = 0
        self._phase = SessionPhase.ROUND_IN_PROGRESS
        logger.info(
            "session started",
            mode=mode,
            player_ids=[p.player_id for p in players],
            queue=[d.reference for d in queue],
        )

    def current_round(self) -> RoundDescriptor:
        """Return the round being played; only valid while a round is in progress."""
        self._require_in_progress("get current round")
        return self._queue[self._index]

    def preview_round_points(
        self,
        raw_scores: Sequence[RawScore],
        lower_is_better: bool,  # noqa: FBT001
        points_table: PointsTable,
    ) -> dict[int, int]:
        """Compute the points a result would award without touching session or player state."""
        return compute_round_points(self._session_scores(raw_scores), lower_is_better, points_table)

    def complete_round(
        self,
        raw_scores: Sequence[RawScore],
        lower_is_better: bool,  # noqa: FBT001
        points_table: PointsTable,
    ) -> dict[int, int]:
        """
        Score the current round, add points to its category, and advance.

        Returns the points awarded per player. A ConfigurationError from the
        points table propagates before any state changes, leaving the session
        on the same round.
        """
        self._require_in_progress("complete round")
        # capture the category before the index moves
        finished = self._queue[self._index]
        category = finished.category

        scores = self._session_scores(raw_scores)
        points = compute_round_points(scores, lower_is_better, points_table)
        apply_round_result(self._players, points, category, scores)

        logger.info(
            "round completed",
            round_index=self._index,
            reference=finished.reference,
            category=category,
            points=points,
        )

        self._index += 1
        if self._index >= len(self._queue):
            self._finish()
        return points

    def results(self) -> list[PlayerSummary]:
        """Return per-player totals, chart-scaled totals and classification for a completed session."""
        if self._phase != SessionPhase.COMPLETED:
            raise InvalidSessionStateError(operation="read results", state=self._phase.value)
        return [
            PlayerSummary(
                player_id=p.player_id,
                name=p.name,
                category_totals=dict(p.category_totals),
                normalized_totals=normalized_totals(p.category_totals, self._settings.radar_scale),
                classification=p.classification,
            )
            for p in self._players
        ]

    def abandon(self) -> None:
        """Drop the session and return every roster player to the lobby state."""
        if self._roster is not None:
            self._roster.reset_for_lobby()
        logger.info("session abandoned", phase=self._phase, round_index=self._index)
        self._phase = SessionPhase.NOT_STARTED
        self._mode = None
        self._roster = None
        self._players = []
        self._queue = []
        self._index = 0

    def _finish(self) -> None:
        self._phase = SessionPhase.COMPLETED
        if self._mode == SessionMode.DIAGNOSIS:
            for player in self._players:
                player.classification = classify(player.category_totals, self._settings)
        logger.info(
            "session completed",
            mode=self._mode,
            labels={p.player_id: p.classification.label for p in self._players if p.classification},
        )

    def _session_scores(self, raw_scores: Sequence[RawScore]) -> list[RawScore]:
        """Drop scores for players outside the session."""
        session_ids = {p.player_id for p in self._players}
        kept = [s for s in raw_scores if s.player_id in session_ids]
        if len(kept) != len(raw_scores):
            dropped = [s.player_id for s in raw_scores if s.player_id not in session_ids]
            logger.warning("scores from players outside the session ignored", player_ids=dropped)
        return kept

    def _require_in_progress(self, operation: str) -> None:
        if self._phase != SessionPhase.ROUND_IN_PROGRESS:
            raise InvalidSessionStateError(operation=operation, state=self._phase.value)
