"""
Shared body builders for the skeleton engine tests.
"""

import pytest

from skeleton_engine.common.enums import JointType, TrackingState
from skeleton_engine.common.models import Body, Joint

UPPER_BODY = {
    JointType.HEAD: (0.0, 1.8, 0.0),
    JointType.NECK: (0.0, 1.6, 0.0),
    JointType.SPINE_SHOULDER: (0.0, 1.4, 0.0),
    JointType.SPINE_MID: (0.0, 1.0, 0.0),
    JointType.SPINE_BASE: (0.0, 0.5, 0.0),
}

LEFT_LEG = {
    JointType.HIP_LEFT: (0.0, 0.5, 0.0),
    JointType.KNEE_LEFT: (0.0, 0.25, 0.0),
    JointType.ANKLE_LEFT: (0.0, 0.05, 0.0),
    JointType.FOOT_LEFT: (0.1, 0.0, 0.0),
}

RIGHT_LEG = {
    JointType.HIP_RIGHT: (0.0, 0.5, 0.0),
    JointType.KNEE_RIGHT: (0.0, 0.25, 0.0),
    JointType.ANKLE_RIGHT: (0.0, 0.05, 0.0),
    JointType.FOOT_RIGHT: (0.1, 0.0, 0.0),
}


def build_body(positions, state=TrackingState.TRACKED, states=None, is_tracked=True):
    """Builds a body from {JointType: (x, y, z)}, with optional per-joint states."""
    states = states or {}
    joints = [
        Joint.at(joint_type, *xyz, tracking_state=states.get(joint_type, state))
        for joint_type, xyz in positions.items()
    ]
    return Body.from_joints(joints, is_tracked=is_tracked)


@pytest.fixture
def body_factory():
    return build_body


@pytest.fixture
def scenario_body():
    """Upper body and left leg Tracked, right leg NotTracked."""
    positions = {**UPPER_BODY, **LEFT_LEG, **RIGHT_LEG}
    states = {joint_type: TrackingState.NOT_TRACKED for joint_type in RIGHT_LEG}
    return build_body(positions, states=states)
