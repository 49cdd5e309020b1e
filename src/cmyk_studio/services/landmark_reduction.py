"""
CMYK Portrait Studio - Landmark Reduction

Reduces raw landmark lists from a face/hand landmark detector (MediaPipe
468-point face mesh, 21-point hands) to the handful of points the tracking
binder consumes. Any object with normalized `x` and `y` attributes works as
a landmark.
"""

from typing import Iterable, Optional, Sequence, Tuple

from cmyk_studio.models.tracking import Hand, Handedness, TrackingObservation
from cmyk_studio.models.transform import Vec2

# Face mesh indices
LEFT_EYE_CORNERS = (33, 133)
RIGHT_EYE_CORNERS = (362, 263)
LIPS_CENTER = 13
NOSE_TIP = 1
FACE_LEFT_EDGE = 234
FACE_RIGHT_EDGE = 454

# Hand landmark used as palm center (middle finger MCP)
PALM_CENTER = 9

# Ears sit slightly outside the face edges, at eye height
EAR_OUTSET = 0.05


def _point(landmark) -> Vec2:
    return Vec2(float(landmark.x), float(landmark.y))


def _midpoint(a: Vec2, b: Vec2) -> Vec2:
    return Vec2((a.x + b.x) / 2, (a.y + b.y) / 2)


def face_points(landmarks: Sequence) -> dict:
    """Named face points from one face mesh

    Returns:
        Dict of TrackingObservation field name to Vec2
    """
    left_eye = _midpoint(*(_point(landmarks[i]) for i in LEFT_EYE_CORNERS))
    right_eye = _midpoint(*(_point(landmarks[i]) for i in RIGHT_EYE_CORNERS))
    eyes = _midpoint(left_eye, right_eye)

    ear_y = eyes.y
    return {
        'left_eye': left_eye,
        'right_eye': right_eye,
        'eyes': eyes,
        'lips': _point(landmarks[LIPS_CENTER]),
        'nose': _point(landmarks[NOSE_TIP]),
        'left_ear': Vec2(float(landmarks[FACE_LEFT_EDGE].x) - EAR_OUTSET, ear_y),
        'right_ear': Vec2(float(landmarks[FACE_RIGHT_EDGE].x) + EAR_OUTSET, ear_y),
    }


def hand_from_landmarks(landmarks: Sequence, category_name: str) -> Optional[Hand]:
    """Build a Hand from 21 hand landmarks and the detector's handedness label

    Returns:
        Hand, or None if the label is not Left/Right
    """
    try:
        handedness = Handedness(category_name)
    except ValueError:
        return None
    return Hand(handedness=handedness, center=_point(landmarks[PALM_CENTER]))


def observation_from_landmarks(face_landmarks: Optional[Sequence] = None,
                               hands: Iterable[Tuple[Sequence, str]] = ()) -> TrackingObservation:
    """Build one tick's observation

    Args:
        face_landmarks: Face mesh of the first detected face, or None
        hands: (hand landmarks, handedness label) per detected hand

    Returns:
        TrackingObservation (fields missing when nothing was detected)
    """
    points = face_points(face_landmarks) if face_landmarks else {}

    detected = []
    for landmarks, category_name in hands:
        hand = hand_from_landmarks(landmarks, category_name)
        if hand is not None:
            detected.append(hand)

    return TrackingObservation(hands=tuple(detected), **points)
