import logging
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, model_validator

logger = logging.getLogger(__name__)


class Tier(str, Enum):
  S = 'S'
  A = 'A'
  B = 'B'
  F = 'F'

  @property
  def rank(self):
    # 0 is best
    return _RANK[self]


_RANK = {Tier.S: 0, Tier.A: 1, Tier.B: 2, Tier.F: 3}


class Band(BaseModel):
  model_config = ConfigDict(frozen=True)

  tier: Tier
  min: Optional[float] = None
  max: Optional[float] = None
  label: Optional[str] = None

  @model_validator(mode='after')
  def _bounds(self):
    if self.min is not None and self.max is not None and self.min > self.max:
      raise ValueError(f'band {self.tier.value}: min {self.min} > max {self.max}')
    return self

  def contains(self, value):
    # closed interval, a missing bound is unbounded on that side
    if self.min is not None and value < self.min:
      return False
    if self.max is not None and value > self.max:
      return False
    return True


def check_order(name, bands):
  """Warn when a table is not listed best tier first. Order is kept as authored."""
  ranks = [b.tier.rank for b in bands]
  if ranks != sorted(ranks):
    logger.warning('threshold table %s lists tiers out of order: %s; first match still wins',
                   name, [b.tier.value for b in bands])
    return False
  return True


def classify(value, bands: Optional[List[Band]]):
  """First band containing value wins; anything unmatched is F.

  Returns (tier, label).
  """
  for band in bands or ():
    if band.contains(value):
      return band.tier, band.label
  return Tier.F, None


def tier_for(calibration, pose, name, value):
  """Select the table for (pose, metric name) from the calibration and classify value."""
  bands = calibration.table(pose, name)
  if bands is None:
    logger.warning('no threshold table for %s/%s, classifying as F', calibration.group(pose), name)
  return classify(value, bands)
