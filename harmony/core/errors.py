from enum import Enum


class ErrorKind(str, Enum):
  # report level
  NO_FACE_DETECTED = 'NoFaceDetected'
  # metric level, the metric is clamped to 0 and flagged invalid
  DEGENERATE_GEOMETRY = 'DegenerateGeometry'
  NON_FINITE_RESULT = 'NonFiniteResult'
