# skeleton_engine/processing/body_processor.py
import logging
import time
from ..common.models import BodyResult, FrameMetadata
from ..common.enums import PoseState
from ..camera.body_frame_reader import BodyBuffer, BodyFrame, bodies
from .body_selector import default_body
from .body_metrics import measure, HEAD_DIVERGENCE_M
from .joint_filter import tracked_joints

logger = logging.getLogger(__name__)

class BodyProcessor:
    """Turns each sensor frame into the metrics of the body standing in front of the sensor."""

    def __init__(self, config: dict):
        self.config = config
        self.state = PoseState.INITIALIZING

        self.include_inferred = config.get('include_inferred', True)
        self.head_divergence = config.get('head_divergence_m', HEAD_DIVERGENCE_M)

        # One buffer per session, reused for every frame
        self.buffer = BodyBuffer()
        self.state = PoseState.SEARCHING
        self.last_detection_time = 0.0

    def process_frame(self, frame: BodyFrame, metadata: FrameMetadata) -> BodyResult:
        """Selects the primary body of a frame and measures it."""
        start_time = time.perf_counter()

        frame_bodies = bodies(frame, self.buffer)
        tracked_body_count = sum(1 for body in frame_bodies if body.is_tracked)
        body = default_body(frame_bodies)

        if body is None:
            processing_time_ms = (time.perf_counter() - start_time) * 1000
            self._set_state(PoseState.SEARCHING, metadata)
            return BodyResult(
                timestamp=metadata.timestamp,
                frame_id=metadata.frame_id,
                processing_time_ms=processing_time_ms,
                status=self.state,
                tracked_body_count=tracked_body_count,
            )

        metrics = measure(body, self.include_inferred, self.head_divergence)
        joints = tracked_joints(body, self.include_inferred)
        processing_time_ms = (time.perf_counter() - start_time) * 1000

        self._set_state(PoseState.TRACKING, metadata)
        self.last_detection_time = metadata.timestamp

        return BodyResult(
            timestamp=metadata.timestamp,
            frame_id=metadata.frame_id,
            processing_time_ms=processing_time_ms,
            status=self.state,
            tracked_body_count=tracked_body_count,
            body=body,
            metrics=metrics,
            tracked_joints=joints,
        )

    def _set_state(self, state: PoseState, metadata: FrameMetadata):
        if state != self.state:
            logger.info("Frame %d: %s -> %s", metadata.frame_id, self.state.value, state.value)
        self.state = state
