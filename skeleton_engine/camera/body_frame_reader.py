# skeleton_engine/camera/body_frame_reader.py
from typing import List, Optional, Protocol
from ..common.models import Body

class BodyFrameSource(Protocol):
    """The sensor side of a body stream."""
    body_count: int

class BodyFrame(Protocol):
    """One sensor snapshot able to write its bodies into a caller-owned list."""
    body_frame_source: BodyFrameSource

    def get_and_refresh_body_data(self, bodies: List[Body]) -> None: ...

class BodyBuffer:
    """
    Reusable storage for the bodies of the current frame.
    Create one per frame-processing loop; it is not safe to share between threads.
    """

    def __init__(self):
        self._bodies: Optional[List[Body]] = None

    @property
    def allocated(self) -> bool:
        return self._bodies is not None

    def refresh(self, frame: BodyFrame) -> List[Body]:
        """Overwrites the buffer contents with the frame's bodies and returns the buffer."""
        if self._bodies is None:
            self._bodies = [Body.untracked() for _ in range(frame.body_frame_source.body_count)]

        frame.get_and_refresh_body_data(self._bodies)
        return self._bodies

def bodies(frame: BodyFrame, buffer: BodyBuffer) -> List[Body]:
    """
    Returns the bodies found in the frame.
    The returned list is the buffer itself and is overwritten by the next call.
    """
    return buffer.refresh(frame)
