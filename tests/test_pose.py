from conftest import FRONTAL, face

from harmony.core import landmarks as L
from harmony.core.pose import Pose, ProfileIndices, classify_pose


def anchors(nose_x, left_x, right_x):
  return face({L.NOSE_TIP: (nose_x, 0.5), L.LEFT_CHEEK: (left_x, 0.5), L.RIGHT_CHEEK: (right_x, 0.5)}, fill=False)


def test_frontal_scenario():
  res = classify_pose(anchors(0.5, 0.3, 0.7))
  assert res.pose is Pose.FRONTAL
  assert res.indices is None


def test_right_profile_from_narrow_face():
  res = classify_pose(anchors(0.75, 0.6, 0.65))
  assert res.pose is Pose.PROFILE_RIGHT
  assert res.indices == ProfileIndices(132, 172, 152)


def test_left_profile_uses_left_side_indices():
  res = classify_pose(anchors(0.25, 0.35, 0.4))
  assert res.pose is Pose.PROFILE_LEFT
  assert res.indices == ProfileIndices(361, 397, 152)


def test_nose_outside_cheeks_is_profile_even_when_wide():
  assert classify_pose(anchors(0.2, 0.3, 0.7)).pose is Pose.PROFILE_LEFT
  assert classify_pose(anchors(0.8, 0.3, 0.7)).pose is Pose.PROFILE_RIGHT


def test_exact_center_counts_as_right():
  assert classify_pose(anchors(0.5, 0.45, 0.55)).pose is Pose.PROFILE_RIGHT
  assert classify_pose(anchors(0.4999, 0.45, 0.55)).pose is Pose.PROFILE_LEFT


def test_narrowness_threshold_is_configurable():
  lms = anchors(0.5, 0.42, 0.58)
  assert classify_pose(lms).pose is Pose.PROFILE_RIGHT
  assert classify_pose(lms, narrow_face_width=0.1).pose is Pose.FRONTAL


def test_missing_anchor_gives_none():
  pts = dict(FRONTAL)
  del pts[L.RIGHT_CHEEK]
  assert classify_pose(face(pts, fill=False)) is None


def test_pose_is_profile_flag():
  assert not Pose.FRONTAL.is_profile
  assert Pose.PROFILE_LEFT.is_profile and Pose.PROFILE_RIGHT.is_profile
