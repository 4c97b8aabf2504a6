# skeleton_engine/processing/joint_filter.py
from typing import List
from ..common.enums import TrackingState
from ..common.models import Body, Joint

def tracked_joints(body: Body, include_inferred: bool = True) -> List[Joint]:
    """
    Returns the joints usable for further geometry, in the body's joint order.
    NotTracked joints are always dropped. Inferred ones are dropped when include_inferred is False.
    """
    joints = []
    for joint in body.joints.values():
        if joint.tracking_state == TrackingState.TRACKED:
            joints.append(joint)
        elif joint.tracking_state == TrackingState.INFERRED and include_inferred:
            joints.append(joint)
    return joints
