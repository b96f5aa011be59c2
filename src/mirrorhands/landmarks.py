"""
Hand joint indices and skeleton topology of the MediaPipe Hands model.

The 21-point layout is defined by the detector's output schema; it is kept
here as named constants so drawing code never relies on bare indices.
"""

from __future__ import annotations

from enum import IntEnum
from typing import List, Tuple


class HandJoint(IntEnum):
    WRIST = 0
    THUMB_CMC = 1
    THUMB_MCP = 2
    THUMB_IP = 3
    THUMB_TIP = 4
    INDEX_FINGER_MCP = 5
    INDEX_FINGER_PIP = 6
    INDEX_FINGER_DIP = 7
    INDEX_FINGER_TIP = 8
    MIDDLE_FINGER_MCP = 9
    MIDDLE_FINGER_PIP = 10
    MIDDLE_FINGER_DIP = 11
    MIDDLE_FINGER_TIP = 12
    RING_FINGER_MCP = 13
    RING_FINGER_PIP = 14
    RING_FINGER_DIP = 15
    RING_FINGER_TIP = 16
    PINKY_MCP = 17
    PINKY_PIP = 18
    PINKY_DIP = 19
    PINKY_TIP = 20


NUM_HAND_LANDMARKS = len(HandJoint)

J = HandJoint

HAND_CONNECTIONS: List[Tuple[HandJoint, HandJoint]] = [
    # palm
    (J.WRIST, J.THUMB_CMC),
    (J.WRIST, J.INDEX_FINGER_MCP),
    (J.INDEX_FINGER_MCP, J.MIDDLE_FINGER_MCP),
    (J.MIDDLE_FINGER_MCP, J.RING_FINGER_MCP),
    (J.RING_FINGER_MCP, J.PINKY_MCP),
    (J.WRIST, J.PINKY_MCP),
    # thumb
    (J.THUMB_CMC, J.THUMB_MCP),
    (J.THUMB_MCP, J.THUMB_IP),
    (J.THUMB_IP, J.THUMB_TIP),
    # index
    (J.INDEX_FINGER_MCP, J.INDEX_FINGER_PIP),
    (J.INDEX_FINGER_PIP, J.INDEX_FINGER_DIP),
    (J.INDEX_FINGER_DIP, J.INDEX_FINGER_TIP),
    # middle
    (J.MIDDLE_FINGER_MCP, J.MIDDLE_FINGER_PIP),
    (J.MIDDLE_FINGER_PIP, J.MIDDLE_FINGER_DIP),
    (J.MIDDLE_FINGER_DIP, J.MIDDLE_FINGER_TIP),
    # ring
    (J.RING_FINGER_MCP, J.RING_FINGER_PIP),
    (J.RING_FINGER_PIP, J.RING_FINGER_DIP),
    (J.RING_FINGER_DIP, J.RING_FINGER_TIP),
    # pinky
    (J.PINKY_MCP, J.PINKY_PIP),
    (J.PINKY_PIP, J.PINKY_DIP),
    (J.PINKY_DIP, J.PINKY_TIP),
]

del J
