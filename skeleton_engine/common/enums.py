# skeleton_engine/common/enums.py
from enum import Enum

class JointType(str, Enum):
    """The fixed set of joints reported by the sensor, in sensor order."""
    SPINE_BASE = "SpineBase"
    SPINE_MID = "SpineMid"
    NECK = "Neck"
    HEAD = "Head"
    SHOULDER_LEFT = "ShoulderLeft"
    ELBOW_LEFT = "ElbowLeft"
    WRIST_LEFT = "WristLeft"
    HAND_LEFT = "HandLeft"
    SHOULDER_RIGHT = "ShoulderRight"
    ELBOW_RIGHT = "ElbowRight"
    WRIST_RIGHT = "WristRight"
    HAND_RIGHT = "HandRight"
    HIP_LEFT = "HipLeft"
    KNEE_LEFT = "KneeLeft"
    ANKLE_LEFT = "AnkleLeft"
    FOOT_LEFT = "FootLeft"
    HIP_RIGHT = "HipRight"
    KNEE_RIGHT = "KneeRight"
    ANKLE_RIGHT = "AnkleRight"
    FOOT_RIGHT = "FootRight"
    SPINE_SHOULDER = "SpineShoulder"
    HAND_TIP_LEFT = "HandTipLeft"
    THUMB_LEFT = "ThumbLeft"
    HAND_TIP_RIGHT = "HandTipRight"
    THUMB_RIGHT = "ThumbRight"

class TrackingState(str, Enum):
    """Confidence level of a joint position."""
    NOT_TRACKED = "NotTracked"
    INFERRED = "Inferred"
    TRACKED = "Tracked"

class LegSide(str, Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"

class PoseState(str, Enum):
    """Defines the operational state of the BodyProcessor."""
    INITIALIZING = "INITIALIZING"
    SEARCHING = "SEARCHING"
    TRACKING = "TRACKING"

class LogLevel(str, Enum):
    """Defines logging levels for structured logging."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
