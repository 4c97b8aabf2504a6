# skeleton_engine/processing/body_selector.py
import logging
from typing import Iterable, Optional
from ..common.enums import JointType
from ..common.models import Body
from .geometry import length

logger = logging.getLogger(__name__)

def default_body(bodies: Iterable[Body]) -> Optional[Body]:
    """
    Returns the tracked body closest to the sensor, judged by its SpineBase.
    Ties keep the first body seen. None when nothing is tracked.
    """
    result = None
    closest_distance = float('inf')

    for body in bodies:
        if not body.is_tracked:
            continue

        distance = length(body.joints[JointType.SPINE_BASE].position)
        if result is None or distance < closest_distance:
            result = body
            closest_distance = distance

    if result is not None:
        logger.debug("Primary body at %.3f m", closest_distance)
    return result
