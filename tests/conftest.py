import math

import pytest

from harmony.core import landmarks as L
from harmony.core.config import load_calibration
from harmony.core.landmarks import LandmarkSet


def face(points, fill=True):
  """LandmarkSet with the given {index: (x, y)}; other mesh slots sit at the frame center."""
  coords = {i: (0.5, 0.5) for i in range(L.MESH_SIZE)} if fill else {}
  coords.update(points)
  return LandmarkSet.from_payload([{'index': i, 'x': x, 'y': y} for i, (x, y) in coords.items()])


def jaw_triangle(jaw, angle_deg, ramus=0.2, mandible=0.3, facing=1):
  """Ear straight above the jaw corner, chin swung angle_deg away from it."""
  jx, jy = jaw
  ear = (jx, jy - ramus)
  a = math.radians(angle_deg)
  chin = (jx + facing * mandible * math.sin(a), jy - mandible * math.cos(a))
  return ear, chin


FRONTAL = {
  L.NOSE_TIP: (0.5, 0.55),
  L.LEFT_CHEEK: (0.3, 0.5),
  L.RIGHT_CHEEK: (0.7, 0.5),
  # outer corner about 7 degrees above the inner one
  L.RIGHT_EYE_OUTER: (0.32, 0.42 - 0.088 * math.tan(math.radians(7))),
  L.RIGHT_EYE_INNER: (0.408, 0.42),
  L.LEFT_EYE_INNER: (0.592, 0.42),
}


def profile_right_points(angle_deg=115.0):
  ear, chin = jaw_triangle((0.6, 0.7), angle_deg)
  return {
    L.NOSE_TIP: (0.75, 0.5),
    L.LEFT_CHEEK: (0.6, 0.5),
    L.RIGHT_CHEEK: (0.65, 0.5),
    L.RIGHT_EAR: ear,
    L.RIGHT_JAW: (0.6, 0.7),
    L.CHIN: chin,
  }


@pytest.fixture(scope='session')
def calibration():
  return load_calibration()


@pytest.fixture
def frontal_face():
  return face(FRONTAL)


@pytest.fixture
def right_profile():
  return face(profile_right_points())
