import logging
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from harmony.core.errors import ErrorKind
from harmony.core.landmarks import LandmarkSet
from harmony.core.metrics import frontal_metrics, profile_metrics
from harmony.core.pose import Pose, classify_pose
from harmony.core.tiers import Tier, tier_for

logger = logging.getLogger(__name__)


class Metric(BaseModel):
  model_config = ConfigDict(frozen=True)

  name: str
  value: float
  unit: Literal['degree', 'ratio', 'percent']
  tier: Tier
  tier_label: Optional[str] = None
  valid: bool = True
  issue: Optional[ErrorKind] = None


class AnalysisReport(BaseModel):
  model_config = ConfigDict(frozen=True)

  pose: Optional[Pose] = None
  metrics: Optional[List[Metric]] = None
  error: Optional[ErrorKind] = None

  @model_validator(mode='after')
  def _one_shape(self):
    populated = self.pose is not None and self.metrics is not None
    if populated == (self.error is not None):
      raise ValueError('report carries either pose and metrics or an error')
    return self

  def to_payload(self):
    return self.model_dump(mode='json', exclude_none=True)


def analyze(lms, calibration):
  """One landmark set in, one fresh AnalysisReport out.

  Degenerate or non-finite measurements are clamped to 0 and flagged invalid; they are
  still tiered from that 0. Nothing here raises for bad geometry.
  """
  if lms is None or len(lms) == 0:
    logger.info('no landmarks supplied')
    return AnalysisReport(error=ErrorKind.NO_FACE_DETECTED)
  if not isinstance(lms, LandmarkSet):
    lms = LandmarkSet.from_payload(lms)

  res = classify_pose(lms, calibration.narrow_face_width)
  if res is None:
    logger.info('pose anchors missing from %d landmarks', len(lms))
    return AnalysisReport(error=ErrorKind.NO_FACE_DETECTED)

  raw = profile_metrics(lms, res.indices) if res.pose.is_profile else frontal_metrics(lms)

  metrics = []
  for m in raw:
    tier, label = tier_for(calibration, res.pose, m['name'], m['value'])
    issue = m['issue']
    if issue is not None:
      logger.debug('%s invalid (%s), clamped to %s', m['name'], issue.value, m['value'])
    metrics.append(Metric(
      name=m['name'], value=m['value'], unit=m['unit'],
      tier=tier, tier_label=label,
      valid=issue is None, issue=issue,
    ))
  return AnalysisReport(pose=res.pose, metrics=metrics)
