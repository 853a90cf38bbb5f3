"""Core gameplay logic — selection, judging, timers and round resets."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from backend.engine.content import ContentProvider
from backend.engine.gamestate import RoundState, endgame_order
from backend.engine.judge import Judge
from backend.engine.navigator import FocusNavigator
from backend.engine.scheduler import Handle, ManualScheduler, Scheduler
from backend.models.board import Board, Direction, Tile
from backend.models.puzzle import GROUP_SIZE, Group, Mode
from backend.models.round import MAX_MISTAKES, Phase, SolveRecord, Timings, Verdict

logger = logging.getLogger(__name__)

_KEY_DIRECTIONS: dict[str, Direction] = {
    "up": Direction.UP,
    "arrowup": Direction.UP,
    "down": Direction.DOWN,
    "arrowdown": Direction.DOWN,
    "left": Direction.LEFT,
    "arrowleft": Direction.LEFT,
    "right": Direction.RIGHT,
    "arrowright": Direction.RIGHT,
}

_CONFIRM_KEYS = frozenset({"enter", "space", " "})


class ConnectionsGame:
    """Orchestrates rounds of the grouping puzzle.

    Every intent is a silent no-op when its preconditions fail; the return
    value tells the caller whether anything happened.  Feedback delays go
    through *scheduler*, and each delayed callback is bound to the round
    that scheduled it, so callbacks from before a reset never touch the
    new round.
    """

    def __init__(
        self,
        mode: Mode = Mode.EASY,
        *,
        rng: random.Random | None = None,
        scheduler: Scheduler | None = None,
        timings: Timings | None = None,
        max_mistakes: int = MAX_MISTAKES,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.scheduler = scheduler if scheduler is not None else ManualScheduler()
        self.timings = timings or Timings()
        self.max_mistakes = max_mistakes
        self._generation = 0
        self._handles: list[Handle] = []
        self._near_miss_token = 0
        self.state = self._new_round(Mode(mode))

    # -- round lifecycle ------------------------------------------------------

    def _new_round(self, mode: Mode) -> RoundState:
        puzzle = ContentProvider.puzzle(mode)
        board = Board(tiles=ContentProvider.deal(puzzle, self.rng))
        board.set_focus(0)
        return RoundState(
            mode=mode,
            puzzle=puzzle,
            board=board,
            max_mistakes=self.max_mistakes,
            generation=self._generation,
        )

    def reset(self, mode: Mode | None = None) -> None:
        """Discard the current round and deal a fresh one."""
        for handle in self._handles:
            handle.cancel()
        self._handles.clear()
        self._generation += 1
        self.state = self._new_round(Mode(mode) if mode is not None else self.state.mode)
        logger.info("round %d started (%s)", self._generation, self.state.mode)

    def set_mode(self, mode: Mode) -> None:
        self.reset(mode)

    def replay(self) -> None:
        self.reset(self.state.mode)

    # -- observables ----------------------------------------------------------

    @property
    def mode(self) -> Mode:
        return self.state.mode

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def tiles(self) -> list[Tile]:
        return self.state.board.tiles

    @property
    def groups(self) -> tuple[Group, ...]:
        return self.state.puzzle.groups

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def mistakes(self) -> int:
        return self.state.mistakes

    @property
    def mistakes_remaining(self) -> int:
        return self.state.mistakes_remaining

    @property
    def near_miss(self) -> bool:
        return self.state.near_miss

    @property
    def shake(self) -> bool:
        return self.state.shake

    @property
    def focus_index(self) -> int:
        return self.state.focus_index

    @property
    def selection(self) -> tuple[int, ...]:
        return tuple(self.state.selection)

    @property
    def solved_groups(self) -> tuple[SolveRecord, ...]:
        return tuple(self.state.solved_groups)

    @property
    def pending_collapse(self) -> tuple[int, ...]:
        return tuple(self.state.pending_collapse)

    @property
    def is_over(self) -> bool:
        return self.state.phase.is_terminal

    def aria_label(self, index: int) -> str:
        tile = self.board.get_tile(index)
        return tile.label if tile is not None else ""

    def unsolved_groups(self) -> dict[int, list[int]]:
        return self.board.unsolved_groups()

    def endgame_group_order(self) -> list[int]:
        return endgame_order(self.state.solved_groups, len(self.groups))

    # -- selection ------------------------------------------------------------

    def toggle_select(self, index: int) -> bool:
        """Select or deselect the tile at *index*.

        Returns True if the selection changed.  A fifth tile is refused,
        never swapped in.
        """
        state = self.state
        tile = state.board.get_tile(index)
        if not state.is_playing or tile is None or tile.solved or tile.animating:
            logger.debug("toggle_select(%d) ignored", index)
            return False

        if tile.selected:
            tile.selected = False
            state.selection.remove(index)
            return True
        if len(state.selection) < GROUP_SIZE:
            tile.selected = True
            state.selection.append(index)
            return True
        return False

    def deselect_all(self) -> None:
        self.state.clear_selection()

    def can_submit(self) -> bool:
        state = self.state
        return (
            len(state.selection) == GROUP_SIZE
            and state.is_playing
            and not state.pending_collapse
            and not state.shake
        )

    def submit(self) -> Verdict | None:
        """Judge the four selected tiles.

        Returns the verdict, or ``None`` if the submission was not allowed.
        """
        if not self.can_submit():
            logger.debug("submit ignored")
            return None

        state = self.state
        indices = list(state.selection)
        groups = [state.board.tiles[i].group for i in indices]
        verdict = Judge.classify(groups, state.solved_group_ids)
        logger.info("submit %s -> %s", [state.board.tiles[i].text for i in indices], verdict)

        if verdict is Verdict.CORRECT:
            self._start_collapse(indices, groups[0])
        else:
            self._register_mistake(verdict)
        return verdict

    # -- correct path ---------------------------------------------------------

    def _start_collapse(self, indices: list[int], group: int) -> None:
        state = self.state
        for i in indices:
            state.board.tiles[i].animating = True
            state.board.tiles[i].selected = False
        state.pending_collapse = indices
        self._schedule(self.timings.collapse, lambda: self._finish_collapse(group))

    def _finish_collapse(self, group: int) -> None:
        state = self.state
        indices = state.pending_collapse
        state.pending_collapse = []

        if not state.is_playing:
            # Gave up mid-collapse: the group was never confirmed.
            for i in indices:
                state.board.tiles[i].animating = False
            return

        for i in indices:
            state.board.tiles[i].solved = True
            state.board.tiles[i].animating = False
        record = state.record_solve(group, indices)
        state.clear_selection()
        logger.info("group %d solved (order %d)", record.group, record.order)

        if len(state.solved_groups) == len(state.puzzle.groups):
            state.transition(Phase.WON)
            logger.info("round %d won with %d mistakes", self._generation, state.mistakes)

    # -- incorrect path -------------------------------------------------------

    def _register_mistake(self, verdict: Verdict) -> None:
        state = self.state
        state.shake = True
        state.mistakes += 1
        self._flag_near_miss(verdict is Verdict.NEAR_MISS)

        if state.mistakes >= state.max_mistakes:
            state.transition(Phase.LOST)
            state.clear_selection()
            logger.info("round %d lost", self._generation)

        self._schedule(self.timings.shake, self._end_shake)

    def _end_shake(self) -> None:
        self.state.shake = False
        self.state.clear_selection()

    def _flag_near_miss(self, near_miss: bool) -> None:
        self.state.near_miss = near_miss
        if not near_miss:
            return
        self._near_miss_token += 1
        token = self._near_miss_token

        def clear() -> None:
            if token == self._near_miss_token:
                self.state.near_miss = False

        self._schedule(self.timings.near_miss, clear)

    # -- give up --------------------------------------------------------------

    def skip(self) -> bool:
        """Give up the round.  In-flight timers keep running."""
        if not self.state.transition(Phase.LOST):
            return False
        self.state.gave_up = True
        self.state.clear_selection()
        logger.info("round %d given up", self._generation)
        return True

    # -- reshuffle ------------------------------------------------------------

    def shuffle_words(self) -> bool:
        """Shuffle the unsolved tiles among their own positions."""
        state = self.state
        if not state.is_playing or state.pending_collapse:
            return False
        positions = state.board.unsolved_indices()
        tiles = [state.board.tiles[i] for i in positions]
        self.rng.shuffle(tiles)
        state.board.place(positions, tiles)
        state.clear_selection()
        return True

    # -- focus ----------------------------------------------------------------

    def set_focus(self, index: int) -> bool:
        """Move the cursor to *index* unless that tile is solved."""
        tile = self.board.get_tile(index)
        if tile is None or tile.solved:
            return False
        self.board.set_focus(index)
        return True

    def move_focus(self, direction: Direction) -> bool:
        """Step the cursor once.  A solved target blocks the move."""
        if not self.state.is_playing:
            return False
        target = FocusNavigator.target(self.focus_index, direction, self.board.size)
        return self.set_focus(target)

    def handle_key(self, key: str) -> bool:
        """Apply a navigation key.  Returns True if the key was consumed."""
        if not self.state.is_playing:
            return False
        if key in _CONFIRM_KEYS or key.lower() in _CONFIRM_KEYS:
            self.toggle_select(self.focus_index)
            return True
        direction = _KEY_DIRECTIONS.get(key.lower())
        if direction is None:
            return False
        self.move_focus(direction)
        return True

    # -- timers ---------------------------------------------------------------

    def _schedule(self, delay: int, callback: Callable[[], None]) -> Handle:
        generation = self._generation

        def fire() -> None:
            if generation != self._generation:
                logger.debug("dropping timer from round %d", generation)
                return
            callback()

        self._handles = [h for h in self._handles if h.active]
        handle = self.scheduler.call_later(delay, fire)
        self._handles.append(handle)
        return handle
