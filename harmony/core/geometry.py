import math

import numpy as np

from harmony.core.errors import ErrorKind

DEGENERATE = ErrorKind.DEGENERATE_GEOMETRY
NON_FINITE = ErrorKind.NON_FINITE_RESULT


def distance(p1, p2):
  # hypot saturates to inf on huge coordinates instead of raising
  return float(math.hypot(p1.x - p2.x, p1.y - p2.y))


def angle_at_vertex(a, b, c):
  """Interior angle at b of triangle a-b-c in degrees, via the law of cosines.

  Returns (angle, issue). A missing point or a collapsed side gives (0.0, DEGENERATE),
  an infinite or NaN side or cosine gives (0.0, NON_FINITE); issue is None for a
  measured angle, which always lies in [0, 180].
  """
  if a is None or b is None or c is None:
    return 0.0, DEGENERATE
  ab = distance(a, b)
  bc = distance(b, c)
  ac = distance(a, c)
  if not (math.isfinite(ab) and math.isfinite(bc) and math.isfinite(ac)):
    return 0.0, NON_FINITE
  denom = 2 * bc * ab
  if denom == 0:
    return 0.0, DEGENERATE
  num = bc*bc + ab*ab - ac*ac
  if not (math.isfinite(num) and math.isfinite(denom)):
    return 0.0, NON_FINITE
  # rounding can push the cosine just past +/-1
  cosine = float(np.clip(num / denom, -1.0, 1.0))
  angle = float(np.degrees(np.arccos(cosine)))
  if not math.isfinite(angle):
    return 0.0, NON_FINITE
  return angle, None


def ratio(num, den, scale=1.0):
  """num / den * scale, clamped to (0.0, issue) for a zero denominator or non-finite term."""
  if den == 0:
    return 0.0, DEGENERATE
  if not (math.isfinite(num) and math.isfinite(den)):
    return 0.0, NON_FINITE
  r = num / den * scale
  if not math.isfinite(r):
    return 0.0, NON_FINITE
  return float(r), None


def segment_tilt(inner, outer):
  """Tilt of the inner->outer segment in degrees, -atan2(dy, |dx|).

  Image y grows downward, so the sign is flipped: positive means the outer end sits higher.
  For dx > 0 this is exactly -atan2(dy, dx); |dx| keeps the same reading when the outer
  end lies to the left, as for the subject's right eye.
  """
  dx = outer.x - inner.x
  dy_img = outer.y - inner.y
  if not (math.isfinite(dx) and math.isfinite(dy_img)):
    return 0.0, NON_FINITE
  if dx == 0 and dy_img == 0:
    return 0.0, DEGENERATE
  tilt = float(np.degrees(-np.arctan2(dy_img, abs(dx))))
  if not math.isfinite(tilt):
    return 0.0, NON_FINITE
  return tilt, None
