# skeleton_engine/processing/body_metrics.py
"""
Height estimation from a single frame's joints.

Lower-body joints are often occluded, so height is assembled from the
head-to-spine-base chain plus whichever leg the sensor sees best, plus a
fixed allowance for the head joint sitting at the skull center.
"""
import logging
from typing import Iterable, Tuple
from ..common.enums import JointType, TrackingState, LegSide
from ..common.models import Body, Joint, BodyMetrics
from .geometry import chain_length
from .joint_filter import tracked_joints

logger = logging.getLogger(__name__)

# Distance between the head joint and the top of the skull, in meters.
HEAD_DIVERGENCE_M = 0.1

UPPER_BODY_CHAIN: Tuple[JointType, ...] = (
    JointType.HEAD,
    JointType.NECK,
    JointType.SPINE_SHOULDER,
    JointType.SPINE_MID,
    JointType.SPINE_BASE,
)

LEG_CHAINS = {
    LegSide.LEFT: (JointType.HIP_LEFT, JointType.KNEE_LEFT, JointType.ANKLE_LEFT, JointType.FOOT_LEFT),
    LegSide.RIGHT: (JointType.HIP_RIGHT, JointType.KNEE_RIGHT, JointType.ANKLE_RIGHT, JointType.FOOT_RIGHT),
}

def number_of_tracked_joints(joints: Iterable[Joint]) -> int:
    """Counts joints that are fully Tracked. Inferred joints do not count."""
    return sum(1 for joint in joints if joint.tracking_state == TrackingState.TRACKED)

def _chain(body: Body, chain: Tuple[JointType, ...]) -> float:
    return chain_length([body.joints[joint_type].position for joint_type in chain])

def leg_side(body: Body) -> LegSide:
    """
    Picks the leg with more Tracked joints.
    An equal count falls back to the right leg.
    """
    left = number_of_tracked_joints(body.joints[jt] for jt in LEG_CHAINS[LegSide.LEFT])
    right = number_of_tracked_joints(body.joints[jt] for jt in LEG_CHAINS[LegSide.RIGHT])
    return LegSide.LEFT if left > right else LegSide.RIGHT

def upper_height(body: Body) -> float:
    """Head to spine base, in meters. No leg and no head allowance."""
    return _chain(body, UPPER_BODY_CHAIN)

def height(body: Body, head_divergence: float = HEAD_DIVERGENCE_M) -> float:
    """Estimated standing height of the body, in meters."""
    side = leg_side(body)
    leg_length = _chain(body, LEG_CHAINS[side])
    upper = upper_height(body)

    logger.debug("Height from upper=%.3f m, %s leg=%.3f m", upper, side.value, leg_length)
    return upper + leg_length + head_divergence

def measure(body: Body, include_inferred: bool = True,
            head_divergence: float = HEAD_DIVERGENCE_M) -> BodyMetrics:
    """Collects every per-body metric for one frame."""
    return BodyMetrics(
        height_m=height(body, head_divergence),
        upper_height_m=upper_height(body),
        leg_side=leg_side(body),
        tracked_joint_count=len(tracked_joints(body, include_inferred)),
    )
