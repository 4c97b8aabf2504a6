# skeleton_engine/common/models.py
import numpy as np
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, Dict, Iterable, List
from .enums import JointType, TrackingState, LegSide, PoseState

class Joint(BaseModel):
    """A single anatomical landmark. Position is in meters, sensor-relative."""
    joint_type: JointType
    position: np.ndarray
    tracking_state: TrackingState = TrackingState.NOT_TRACKED

    class Config:
        arbitrary_types_allowed = True

    @field_validator('position', mode='before')
    @classmethod
    def _xyz(cls, value) -> np.ndarray:
        position = np.asarray(value, dtype=float)
        if position.shape != (3,):
            raise ValueError(f"position must be [x, y, z], got shape {position.shape}")
        return position

    @classmethod
    def at(cls, joint_type: JointType, x: float, y: float, z: float,
           tracking_state: TrackingState = TrackingState.TRACKED) -> "Joint":
        return cls(joint_type=joint_type, position=np.array([x, y, z], dtype=float),
                   tracking_state=tracking_state)

    @classmethod
    def not_tracked(cls, joint_type: JointType) -> "Joint":
        return cls(joint_type=joint_type, position=np.zeros(3))

class Body(BaseModel):
    """
    One detected subject in a single frame.
    `joints` always holds every JointType, keyed and ordered by the enum.
    Joint types missing from the input are filled in as NotTracked at the origin.
    """
    is_tracked: bool = False
    joints: Dict[JointType, Joint] = Field(default_factory=dict)

    class Config:
        arbitrary_types_allowed = True

    @model_validator(mode='after')
    def _full_joint_set(self) -> "Body":
        for joint_type, joint in self.joints.items():
            if joint.joint_type != joint_type:
                raise ValueError(f"Joint keyed as {joint_type.value} is a {joint.joint_type.value}")

        self.joints = {
            jt: self.joints[jt] if jt in self.joints else Joint.not_tracked(jt)
            for jt in JointType
        }
        return self

    @classmethod
    def from_joints(cls, joints: Iterable[Joint], is_tracked: bool = True) -> "Body":
        """Builds a body from a flat list of joints."""
        return cls(is_tracked=is_tracked, joints={joint.joint_type: joint for joint in joints})

    @classmethod
    def untracked(cls) -> "Body":
        """A stale sensor slot: not tracked, all joints at the origin."""
        return cls.from_joints([], is_tracked=False)

class FrameMetadata(BaseModel):
    """Metadata associated with a single sensor frame."""
    frame_id: int
    timestamp: float

class BodyMetrics(BaseModel):
    height_m: float
    upper_height_m: float
    leg_side: LegSide
    tracked_joint_count: int

class BodyResult(BaseModel):
    """Encapsulates the complete result of a single frame's body processing."""
    timestamp: float
    frame_id: int
    processing_time_ms: float
    status: PoseState
    tracked_body_count: int = 0
    body: Optional[Body] = None
    metrics: Optional[BodyMetrics] = None
    tracked_joints: List[Joint] = Field(default_factory=list)

    class Config:
        arbitrary_types_allowed = True
