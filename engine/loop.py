# engine/loop.py

"""Frame loop driving one tick (update + render) per frame.

Movement is fixed-step: each frame advances the player by one tick no matter
how long the frame took. Elapsed time is measured and exposed for renderers
and diagnostics only.
"""

import asyncio
import time
from typing import Callable, Optional

from .exceptions import FrameLoopStateError
from .frame import GameState, tick
from .input import InputIntent
from .logging import get_logger

logger = get_logger(__name__)

Renderer = Callable[[GameState], None]


class FrameLoop:
    """Schedules ticks at a target frame rate on an asyncio task.

    The frame loop:
    - Runs ``tick`` then the renderer once per frame
    - Reads the shared input intent without mutating it
    - Stops on the first tick error and re-raises it to whoever awaits it
    - Logs performance stats periodically
    """

    def __init__(
        self,
        state: GameState,
        intent: InputIntent,
        renderer: Optional[Renderer] = None,
        target_fps: int = 60,
        stats_interval: float = 10.0,
    ):
        """Initialize frame loop.

        Args:
            state: Game state advanced every frame
            intent: Input intent, updated externally by key events
            renderer: Optional callable receiving the state after each tick
            target_fps: Frames per second to aim for
            stats_interval: Seconds between performance log lines
        """
        self.state = state
        self.intent = intent
        self.renderer = renderer
        self.running = False
        self.update_task: Optional[asyncio.Task] = None
        self.target_fps = target_fps
        self.frame_time = 1.0 / self.target_fps
        self.stats_interval = stats_interval

        self.frames_run = 0
        self.last_delta_time = 0.0
        self._last_frame_at: Optional[float] = None

        # Performance tracking
        self.frame_count = 0
        self.total_frame_time = 0.0
        self.last_stats_time = time.perf_counter()

    def step(self) -> GameState:
        """Run a single frame immediately."""
        now = time.perf_counter()
        if self._last_frame_at is not None:
            self.last_delta_time = now - self._last_frame_at
        self._last_frame_at = now

        tick(self.state, self.intent)
        if self.renderer is not None:
            self.renderer(self.state)

        self.frames_run += 1
        return self.state

    def _collect_finished_task(self) -> None:
        """Drop a background task that already ended, re-raising its tick error."""
        if self.update_task is None or not self.update_task.done():
            return

        finished = self.update_task
        self.update_task = None
        if not finished.cancelled():
            finished.result()

    async def start(self, max_frames: Optional[int] = None) -> None:
        """Start the frame loop as a background task.

        Raises:
            Exception: The tick error that ended a previous background run
        """
        if self.running:
            logger.warning("frame_loop.already_running")
            return

        self._collect_finished_task()

        self.running = True
        self.update_task = asyncio.create_task(self._update_loop(max_frames))
        logger.info("frame_loop.started", target_fps=self.target_fps)

    async def stop(self) -> None:
        """Stop the frame loop.

        Raises:
            Exception: The tick error that ended the loop, if any
        """
        self.running = False
        if self.update_task is None:
            return

        task = self.update_task
        self.update_task = None

        if not task.done():
            task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

        logger.info("frame_loop.stopped", frames_run=self.frames_run)

    async def run(self, max_frames: Optional[int] = None) -> None:
        """Run frames in the current task until stopped or max_frames is reached.

        Raises:
            FrameLoopStateError: If the loop is already running as a task
            Exception: The tick error that ended a previous background run
        """
        self._collect_finished_task()
        if self.update_task is not None and not self.update_task.done():
            raise FrameLoopStateError("Frame loop is already running in the background")

        self.running = True
        await self._update_loop(max_frames)

    async def _update_loop(self, max_frames: Optional[int]) -> None:
        """Main loop running at target FPS."""
        frames_done = 0
        try:
            while self.running and (max_frames is None or frames_done < max_frames):
                frame_start = time.perf_counter()

                self.step()
                frames_done += 1

                # Calculate frame timing
                frame_duration = time.perf_counter() - frame_start
                self.frame_count += 1
                self.total_frame_time += frame_duration

                if time.perf_counter() - self.last_stats_time > self.stats_interval:
                    self._log_performance_stats()

                # Sleep to maintain target FPS
                sleep_time = max(0, self.frame_time - frame_duration)
                if sleep_time > 0:
                    await asyncio.sleep(sleep_time)
                else:
                    if frame_duration > self.frame_time * 2:
                        logger.warning(
                            "frame_loop.slow_frame",
                            frame_duration_ms=frame_duration * 1000,
                            target_ms=self.frame_time * 1000,
                        )
                    await asyncio.sleep(0)

        except asyncio.CancelledError:
            logger.debug("frame_loop.cancelled")
            raise
        except Exception as e:
            logger.error(
                "frame_loop.tick_failed",
                error=str(e),
                frame=self.frames_run,
                exc_info=True,
            )
            raise
        finally:
            self.running = False

    def _log_performance_stats(self) -> None:
        """Log performance statistics."""
        if self.frame_count == 0:
            return

        avg_frame_time = (self.total_frame_time / self.frame_count) * 1000
        target_frame_time = self.frame_time * 1000

        logger.info(
            "frame_loop.performance",
            frames=self.frame_count,
            avg_frame_time_ms=f"{avg_frame_time:.2f}",
            target_ms=f"{target_frame_time:.2f}",
            player_position=self.state.player.position,
        )

        # Reset counters
        self.frame_count = 0
        self.total_frame_time = 0.0
        self.last_stats_time = time.perf_counter()
