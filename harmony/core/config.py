import logging
import os
import pathlib
from typing import Dict, List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from harmony.core.tiers import Band, check_order

load_dotenv()

logger = logging.getLogger(__name__)

PACKAGE_ROOT = pathlib.Path(__file__).resolve().parents[1]
DEFAULT_CALIBRATION = PACKAGE_ROOT / 'calibration' / 'default.yaml'


class CalibrationError(Exception):
  pass


class Calibration(BaseModel):
  """Threshold bands per pose group and metric, plus the pose narrowness threshold."""
  model_config = ConfigDict(frozen=True)

  version: Optional[str] = None
  narrow_face_width: float = Field(0.2, ge=0.0)
  profile: Dict[str, List[Band]] = {}
  frontal: Dict[str, List[Band]] = {}

  @model_validator(mode='after')
  def _warn_order(self):
    for group in ('profile', 'frontal'):
      for name, bands in getattr(self, group).items():
        check_order(f'{group}.{name}', bands)
    return self

  @staticmethod
  def group(pose):
    return 'profile' if pose.is_profile else 'frontal'

  def table(self, pose, name):
    return getattr(self, self.group(pose)).get(name)


def parse_calibration(data, source='<data>'):
  if not isinstance(data, dict):
    raise CalibrationError(f'{source}: calibration must be a mapping')
  try:
    return Calibration.model_validate(data)
  except ValidationError as e:
    raise CalibrationError(f'{source}: {e}') from e


def load_calibration(path=None):
  path = pathlib.Path(path or DEFAULT_CALIBRATION)
  try:
    with open(path, 'r') as f:
      data = yaml.safe_load(f)
  except (OSError, yaml.YAMLError) as e:
    raise CalibrationError(f'cannot read calibration {path}: {e}') from e
  cal = parse_calibration(data, str(path))
  logger.info('loaded calibration %s (version %s)', path, cal.version)
  return cal


def _origins(raw):
  return [o.strip() for o in raw.split(',') if o.strip()]


class Settings(BaseModel):
  # read at construction so a fresh Settings() sees the current environment
  calibration_path: str = Field(default_factory=lambda: os.getenv('HARMONY_CALIBRATION', str(DEFAULT_CALIBRATION)))
  log_level: str = Field(default_factory=lambda: os.getenv('HARMONY_LOG_LEVEL', 'INFO').upper())
  cors_origins: List[str] = Field(default_factory=lambda: _origins(os.getenv('HARMONY_CORS_ORIGINS', '*')))
