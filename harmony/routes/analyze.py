from fastapi import APIRouter, Request, WebSocket, WebSocketDisconnect
import json
import logging
from typing import List, Optional

from pydantic import BaseModel, ValidationError

from harmony.core.landmarks import LandmarkSet
from harmony.core.report import analyze

logger = logging.getLogger(__name__)

router = APIRouter()


class LandmarkIn(BaseModel):
  x: float
  y: float
  index: Optional[int] = None


class AnalyzeRequest(BaseModel):
  landmarks: Optional[List[LandmarkIn]] = None


def run(req, calibration):
  lms = LandmarkSet.from_payload([lm.model_dump() for lm in req.landmarks or []])
  return analyze(lms, calibration).to_payload()


@router.post('/analyze')
def analyze_http(req: AnalyzeRequest, request: Request):
  return run(req, request.app.state.calibration)


@router.websocket('/ws/analyze')
async def ws_analyze(ws: WebSocket):
  await ws.accept()
  # every message is analyzed on its own, nothing is kept between frames
  calibration = ws.app.state.calibration
  try:
    while True:
      msg = await ws.receive()
      if msg['type'] == 'websocket.disconnect':
        break
      if msg.get('text') is None:
        await ws.send_text(json.dumps({'error': 'expected JSON landmarks'}))
        continue
      try:
        p = json.loads(msg['text'])
      except ValueError:
        await ws.send_text(json.dumps({'error': 'invalid json'}))
        continue
      try:
        req = AnalyzeRequest.model_validate(p)
      except ValidationError as e:
        await ws.send_text(json.dumps({'error': 'invalid landmarks', 'detail': e.errors(include_url=False)}, default=str))
        continue
      await ws.send_text(json.dumps(run(req, calibration)))
  except WebSocketDisconnect:
    pass
  logger.debug('analyze socket closed')
