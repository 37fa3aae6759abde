"""Animation Loop — advances every primitive once per tick and hands transforms out."""

import logging
import time
from typing import Callable, Dict, Iterator, Optional, Tuple

from ..models.primitives import Transform

logger = logging.getLogger(__name__)

DEFAULT_DELTA_TIME = 0.016  # ~60 FPS nominal step

FrameSink = Callable[[int, Dict[str, Transform]], None]


def tick(objects: Dict, delta_time: float = DEFAULT_DELTA_TIME) -> Dict[str, Transform]:
    """Advance every object's behavior by ``delta_time``; return the new transforms."""
    transforms = {}
    for object_id, obj in objects.items():
        obj.update(delta_time)
        transforms[object_id] = obj.get_transform()
    return transforms


class AnimationLoop:
    """Single-threaded driver target.

    An external frame-presentation mechanism calls ``tick()`` repeatedly.
    Each call advances all objects by a fixed nominal step (or a measured
    ``delta_time`` supplied by the driver) and passes the resulting
    transforms to ``sink``.
    """

    def __init__(self, objects: Dict, delta_time: float = DEFAULT_DELTA_TIME,
                 sink: Optional[FrameSink] = None, perf_metrics: bool = False,
                 report_every: int = 50):
        self.objects = objects
        self.delta_time = delta_time
        self.sink = sink
        self.perf_metrics = perf_metrics
        self.report_every = report_every
        self.frame_idx = 0
        self._tick_seconds = 0.0

    def tick(self, delta_time: Optional[float] = None) -> Dict[str, Transform]:
        dt = self.delta_time if delta_time is None else delta_time
        started = time.perf_counter()
        transforms = tick(self.objects, dt)
        self._tick_seconds += time.perf_counter() - started

        if self.sink is not None:
            self.sink(self.frame_idx, transforms)
        self.frame_idx += 1

        if self.perf_metrics and self.frame_idx % self.report_every == 0:
            logger.info("Frame %d: mean tick %.3f ms over last %d frames",
                        self.frame_idx, self._tick_seconds * 1000.0 / self.report_every,
                        self.report_every)
            self._tick_seconds = 0.0
        return transforms

    def run(self, num_frames: int) -> None:
        for _ in range(num_frames):
            self.tick()

    def frames(self, num_frames: int) -> Iterator[Tuple[int, Dict[str, Transform]]]:
        """Yield ``(frame_idx, transforms)`` for ``num_frames`` ticks."""
        for _ in range(num_frames):
            idx = self.frame_idx
            yield idx, self.tick()
