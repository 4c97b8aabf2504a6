# skeleton_engine/camera/recorded_source.py
import logging
import os
import yaml
from typing import Iterator, List, Tuple
from ..common.enums import JointType, TrackingState
from ..common.models import Body, Joint, FrameMetadata

logger = logging.getLogger(__name__)

# Maximum number of bodies the sensor tracks at once.
DEFAULT_BODY_COUNT = 6
DEFAULT_FRAME_INTERVAL_S = 1.0 / 30

def _mapping(value, what: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be a mapping, got {type(value).__name__}")
    return value

def _sequence(value, what: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{what} must be a list, got {type(value).__name__}")
    return value

def _parse_joint(name: str, data) -> Joint:
    data = _mapping(data, f"Joint '{name}'")
    try:
        joint_type = JointType(name)
        state = TrackingState(data.get('state', TrackingState.TRACKED.value))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid joint entry '{name}': {e}") from e

    position = data.get('position', [0.0, 0.0, 0.0])
    if not isinstance(position, (list, tuple)) or len(position) != 3:
        raise ValueError(f"Joint '{name}' needs an [x, y, z] position, got {position}")
    try:
        return Joint.at(joint_type, *position, tracking_state=state)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Joint '{name}' has a non-numeric position {position}") from e

def _parse_body(data) -> Body:
    data = _mapping(data, "Body")
    joints = [_parse_joint(name, joint)
              for name, joint in _mapping(data.get('joints') or {}, "Body joints").items()]
    return Body.from_joints(joints, is_tracked=bool(data.get('is_tracked', True)))

class RecordedBodyFrame:
    """A replayed frame. Fills the caller's buffer the way the live sensor does."""

    def __init__(self, source: "RecordedBodyFrameSource", bodies: List[Body]):
        self.body_frame_source = source
        self._bodies = bodies

    def get_and_refresh_body_data(self, bodies: List[Body]) -> None:
        if len(self._bodies) > len(bodies):
            raise ValueError(f"Buffer holds {len(bodies)} bodies, frame has {len(self._bodies)}")

        for i in range(len(bodies)):
            bodies[i] = self._bodies[i] if i < len(self._bodies) else Body.untracked()

class RecordedBodyFrameSource:
    """Replays body frames from a YAML recording as if they came from the sensor."""

    def __init__(self, config: dict):
        self.config = config
        self._path = config['recording']
        self.body_count = config.get('body_count', DEFAULT_BODY_COUNT)
        if not os.path.isfile(self._path):
            raise IOError(f"Cannot open recording: {self._path}")

        with open(self._path, 'r') as f:
            recording = _mapping(yaml.safe_load(f) or {}, "Recording")

        self._frames = []
        for index, frame in enumerate(_sequence(recording.get('frames'), "Recording frames")):
            frame = _mapping(frame, f"Frame {index}")
            frame_bodies = [_parse_body(body) for body in _sequence(frame.get('bodies'), f"Frame {index} bodies")]
            if len(frame_bodies) > self.body_count:
                raise ValueError(
                    f"Frame {index} has {len(frame_bodies)} bodies, sensor supports {self.body_count}"
                )
            try:
                timestamp = float(frame.get('timestamp', index * DEFAULT_FRAME_INTERVAL_S))
            except (TypeError, ValueError) as e:
                raise ValueError(f"Frame {index} has an invalid timestamp") from e
            self._frames.append((frame_bodies, timestamp))

        logger.info("Loaded %d frames from %s", len(self._frames), self._path)

    def __len__(self) -> int:
        return len(self._frames)

    def frames(self) -> Iterator[Tuple[RecordedBodyFrame, FrameMetadata]]:
        """Yields each recorded frame with its metadata, in recording order."""
        for frame_id, (frame_bodies, timestamp) in enumerate(self._frames, start=1):
            yield RecordedBodyFrame(self, frame_bodies), FrameMetadata(frame_id=frame_id, timestamp=timestamp)
