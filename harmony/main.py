from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from harmony.core.config import Settings, load_calibration
from harmony.routes.analyze import router as analyze_router

logger = logging.getLogger('harmony')


def create_app(settings=None, calibration=None):
  settings = settings or Settings()
  logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
  # threshold tables are read once here and handed to every analysis
  if calibration is None:
    calibration = load_calibration(settings.calibration_path)

  app = FastAPI(title='Harmony facial proportion analysis')
  app.state.calibration = calibration
  app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=['*'],
    allow_headers=['*']
  )

  @app.get('/')
  def health():
    return {'msg': 'Harmony analysis service running', 'calibration': calibration.version}

  app.include_router(analyze_router)
  logger.info('service ready, cors origins %s', settings.cors_origins)
  return app


app = create_app()
