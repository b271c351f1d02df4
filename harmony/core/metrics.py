from harmony.core import landmarks as L
from harmony.core.geometry import DEGENERATE, angle_at_vertex, distance, ratio, segment_tilt

GONIAL_ANGLE = 'gonial_angle'
RAMUS_RATIO = 'ramus_ratio'
CANTHAL_TILT = 'canthal_tilt'
EYE_SEPARATION = 'eye_separation'

DEGREE = 'degree'
RATIO = 'ratio'
PERCENT = 'percent'


def _raw(name, value, unit, issue):
  return {'name': name, 'value': value, 'unit': unit, 'issue': issue}


def _dist_ratio(a, b, c, d, scale=1.0):
  # |ab| / |cd| * scale, any missing point collapses the ratio
  if a is None or b is None or c is None or d is None:
    return 0.0, DEGENERATE
  return ratio(distance(a, b), distance(c, d), scale)


def profile_metrics(lms, indices):
  """Gonial angle and ramus/mandible ratio from one side's ear, jaw and chin."""
  ear = lms.get(indices.ear)
  jaw = lms.get(indices.jaw)
  chin = lms.get(indices.chin)

  # angle at the jaw corner, models jawline steepness
  gonial, g_issue = angle_at_vertex(ear, jaw, chin)

  # ramus (ear to jaw) over mandible (jaw to chin)
  ramus, r_issue = _dist_ratio(ear, jaw, jaw, chin)

  return [
    _raw(GONIAL_ANGLE, gonial, DEGREE, g_issue),
    _raw(RAMUS_RATIO, ramus, RATIO, r_issue),
  ]


def frontal_metrics(lms):
  """Canthal tilt of the right eye and eye separation as a percent of face width."""
  outer = lms.get(L.RIGHT_EYE_OUTER)
  inner = lms.get(L.RIGHT_EYE_INNER)
  if outer is None or inner is None:
    tilt, t_issue = 0.0, DEGENERATE
  else:
    tilt, t_issue = segment_tilt(inner, outer)

  esr, e_issue = _dist_ratio(
    inner, lms.get(L.LEFT_EYE_INNER),
    lms.get(L.LEFT_CHEEK), lms.get(L.RIGHT_CHEEK),
    scale=100.0,
  )

  return [
    _raw(CANTHAL_TILT, tilt, DEGREE, t_issue),
    _raw(EYE_SEPARATION, esr, PERCENT, e_issue),
  ]
