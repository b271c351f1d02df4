import logging
from enum import Enum
from typing import NamedTuple, Optional

from harmony.core import landmarks as L

logger = logging.getLogger(__name__)


class Pose(str, Enum):
  FRONTAL = 'Frontal'
  PROFILE_LEFT = 'ProfileLeft'
  PROFILE_RIGHT = 'ProfileRight'

  @property
  def is_profile(self):
    return self is not Pose.FRONTAL


class ProfileIndices(NamedTuple):
  ear: int
  jaw: int
  chin: int


# anatomical numbering is side specific, the chin is shared
PROFILE_INDICES = {
  Pose.PROFILE_LEFT: ProfileIndices(L.LEFT_EAR, L.LEFT_JAW, L.CHIN),
  Pose.PROFILE_RIGHT: ProfileIndices(L.RIGHT_EAR, L.RIGHT_JAW, L.CHIN),
}


class PoseResult(NamedTuple):
  pose: Pose
  indices: Optional[ProfileIndices] = None


def classify_pose(lms, narrow_face_width=0.2):
  """Frontal vs profile from the nose tip and the two cheek anchors.

  Returns None when any anchor is missing from the set.
  """
  nose = lms.get(L.NOSE_TIP)
  left_cheek = lms.get(L.LEFT_CHEEK)
  right_cheek = lms.get(L.RIGHT_CHEEK)
  if nose is None or left_cheek is None or right_cheek is None:
    return None

  face_w = abs(right_cheek.x - left_cheek.x)
  outside = nose.x < left_cheek.x or nose.x > right_cheek.x
  if face_w < narrow_face_width or outside:
    # exact center counts as looking right
    pose = Pose.PROFILE_LEFT if nose.x < 0.5 else Pose.PROFILE_RIGHT
    logger.debug('profile pose %s (face_w=%.4f nose_x=%.4f)', pose.value, face_w, nose.x)
    return PoseResult(pose, PROFILE_INDICES[pose])

  logger.debug('frontal pose (face_w=%.4f nose_x=%.4f)', face_w, nose.x)
  return PoseResult(Pose.FRONTAL)
