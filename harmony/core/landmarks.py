from types import MappingProxyType
from typing import Optional

from pydantic import BaseModel, ConfigDict

# FaceMesh topology indices (468 point mesh). Revalidate if the detector model changes.
NOSE_TIP = 1
RIGHT_EYE_OUTER = 33
RIGHT_EYE_INNER = 133
LEFT_EYE_INNER = 362
LEFT_CHEEK = 234
RIGHT_CHEEK = 454
CHIN = 152

RIGHT_EAR = 132
RIGHT_JAW = 172
LEFT_EAR = 361
LEFT_JAW = 397

MESH_SIZE = 468


class LandmarkPoint(BaseModel):
  model_config = ConfigDict(frozen=True)

  index: int
  x: float
  y: float


class LandmarkSet:
  """Read-only view over one face's landmarks, keyed by mesh index."""

  def __init__(self, points=()):
    self._points = MappingProxyType({p.index: p for p in points})

  @classmethod
  def from_payload(cls, items):
    # detector output is positional; an explicit index wins when given
    pts = []
    for pos, lm in enumerate(items or []):
      if isinstance(lm, LandmarkPoint):
        pts.append(lm)
        continue
      if not isinstance(lm, dict):
        lm = dict(lm)
      idx = lm.get('index')
      pts.append(LandmarkPoint(index=pos if idx is None else idx, x=lm['x'], y=lm['y']))
    return cls(pts)

  def get(self, index) -> Optional[LandmarkPoint]:
    return self._points.get(index)

  def __len__(self):
    return len(self._points)

  def __contains__(self, index):
    return index in self._points

  def __iter__(self):
    return iter(sorted(self._points.values(), key=lambda p: p.index))
