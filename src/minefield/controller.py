"""
Game stage controller.

Routes per-tick input to the board according to the active stage
and moves between Playing, Paused, Defeat and Victory.
"""
import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .board import Board, EXPERT, Params
from .layout import TileLayout
from .stage import (
    Celebration,
    Defeat,
    Explosion,
    Paused,
    Playing,
    Position,
    Stage,
    Victory,
    celebration_schedule,
    explosion_schedule,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class StageConfig:
    """
    Timing constants for stage schedules.

    Attributes:
        ring_delay_ms: Delay between consecutive explosion rings.
        celebration_jitter_ms: Upper bound of the random confetti delay.
    """

    ring_delay_ms: float = 80.0
    celebration_jitter_ms: float = 0.0

    def __post_init__(self) -> None:
        if self.ring_delay_ms < 0:
            raise ValueError("Ring delay cannot be negative")
        if self.celebration_jitter_ms < 0:
            raise ValueError("Celebration jitter cannot be negative")


@dataclass(frozen=True)
class InputSnapshot:
    """
    Input sampled once per tick by the host.

    Attributes:
        pointer: Pointer position in pixels, or None if unavailable.
        primary: Primary button was just pressed.
        secondary: Secondary button was just pressed.
        pause: Pause key was just pressed.
        confirm: Confirm key was just pressed.
        reset: Reset key was just pressed.
        delta_ms: Time since the previous tick.
    """

    pointer: Optional[Tuple[float, float]] = None
    primary: bool = False
    secondary: bool = False
    pause: bool = False
    confirm: bool = False
    reset: bool = False
    delta_ms: float = 0.0


# ============================================================================
# Controller
# ============================================================================

class GameController:
    """
    Owns the board and the active stage.

    Call ``tick`` once per frame; renderers read the accessors.
    """

    def __init__(
        self,
        board: Optional[Board] = None,
        params: Params = EXPERT,
        layout: Optional[TileLayout] = None,
        config: Optional[StageConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize the controller in the Playing stage.

        Args:
            board: Board to drive; a fresh one is built from ``params``
                when omitted.
            params: Parameters for the fresh board.
            layout: Pixel layout shared with the renderer.
            config: Schedule timing constants.
            rng: Random source for celebration jitter.
        """
        self.board = board if board is not None else Board(params)
        self.layout = layout or TileLayout()
        self.config = config or StageConfig()
        self.rng = rng or random.Random()

        self._stage: Stage = Playing()
        self._hover: Optional[Position] = None
        self._run_timer_ms = 0.0
        self._global_ms = 0.0

    # ========================================================================
    # Tick
    # ========================================================================

    def tick(self, snapshot: InputSnapshot) -> Stage:
        """
        Advance one frame.

        Args:
            snapshot: Input and elapsed time for this tick.

        Returns:
            The stage active after the tick.
        """
        stage = self._stage
        if isinstance(stage, Playing):
            self._update_playing(snapshot)
        elif isinstance(stage, Paused):
            self._update_paused(snapshot)
        elif isinstance(stage, Defeat):
            self._update_defeat(stage, snapshot)
        elif isinstance(stage, Victory):
            self._update_victory(stage, snapshot)

        self._global_ms += snapshot.delta_ms
        return self._stage

    def pointer_to_tile(
        self, pointer: Optional[Tuple[float, float]]
    ) -> Optional[Position]:
        """Tile under the pointer, or None when off the board."""
        if pointer is None:
            return None
        return self.layout.to_tile(pointer[0], pointer[1], self.board.dims())

    def _update_playing(self, snapshot: InputSnapshot) -> None:
        if self.board.is_initialized():
            self._run_timer_ms += snapshot.delta_ms

        coords = self.pointer_to_tile(snapshot.pointer)
        last_hover = self._hover
        self._hover = coords

        if coords is not None:
            if snapshot.primary:
                self.board.handle_primary_action(*coords)
            elif snapshot.secondary:
                self.board.handle_secondary_action(*coords)

        if self.board.is_defeat():
            self._enter_defeat(coords if coords is not None else last_hover)
        elif self.board.is_victory():
            self._enter_victory()
        elif snapshot.pause:
            self._set_stage(Paused())

    def _update_paused(self, snapshot: InputSnapshot) -> None:
        if snapshot.confirm:
            self._set_stage(Playing())

    def _update_defeat(self, stage: Defeat, snapshot: InputSnapshot) -> None:
        self._hover = None
        if snapshot.reset:
            self._restart()
            return
        stage.elapsed_ms += snapshot.delta_ms

    def _update_victory(self, stage: Victory, snapshot: InputSnapshot) -> None:
        self._hover = None
        if snapshot.reset:
            self._restart()
            return
        stage.elapsed_ms += snapshot.delta_ms

    # ========================================================================
    # Transitions
    # ========================================================================

    def _enter_defeat(self, trigger: Optional[Position]) -> None:
        if trigger is None:
            # Wait for a tick with a pointer to center the schedule on
            logger.warning("Board defeated with no tile under the pointer")
            return
        explosions = explosion_schedule(
            trigger, self.board.mine_positions(), self.config.ring_delay_ms
        )
        logger.info("Defeat at %s, %d mines scheduled", trigger, len(explosions))
        self._set_stage(Defeat(trigger=trigger, explosions=explosions))

    def _enter_victory(self) -> None:
        celebrations = celebration_schedule(
            self.board.mine_positions(),
            self.config.celebration_jitter_ms,
            self.rng,
        )
        logger.info("Victory after %.0f ms", self._run_timer_ms)
        self._set_stage(
            Victory(celebrations=celebrations, started_at_ms=self._global_ms)
        )

    def _restart(self) -> None:
        self.board.reset()
        self._run_timer_ms = 0.0
        self._hover = None
        self._set_stage(Playing())

    def _set_stage(self, stage: Stage) -> None:
        logger.debug(
            "Stage %s -> %s", type(self._stage).__name__, type(stage).__name__
        )
        self._stage = stage

    # ========================================================================
    # Accessors
    # ========================================================================

    @property
    def stage(self) -> Stage:
        """Currently active stage."""
        return self._stage

    @property
    def hover(self) -> Optional[Position]:
        """Tile under the pointer while playing."""
        return self._hover

    @property
    def run_timer_ms(self) -> float:
        """Time spent playing since the first click of this game."""
        return self._run_timer_ms

    @property
    def global_ms(self) -> float:
        """Time accumulated over every tick."""
        return self._global_ms

    @property
    def explosions(self) -> List[Explosion]:
        """Explosion schedule while defeated, else empty."""
        if isinstance(self._stage, Defeat):
            return self._stage.explosions
        return []

    @property
    def celebrations(self) -> List[Celebration]:
        """Celebration schedule while victorious, else empty."""
        if isinstance(self._stage, Victory):
            return self._stage.celebrations
        return []

    @property
    def stage_elapsed_ms(self) -> float:
        """Time spent in the current Defeat or Victory stage."""
        if isinstance(self._stage, (Defeat, Victory)):
            return self._stage.elapsed_ms
        return 0.0
