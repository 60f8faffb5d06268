"""
HTTP service exposing the court scheduler.
"""

from io import BytesIO
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from . import __version__
from .config import SchedulerConfig
from .engine import build_schedule, validate_schedule
from .export import write_excel
from .layout import MAX_PLAYERS, MIN_PLAYERS

app = FastAPI(title="Court Scheduler API", version=__version__)


class ScheduleRequest(BaseModel):
    numPlayers: int = Field(ge=MIN_PLAYERS, le=MAX_PLAYERS)
    rounds: Optional[int] = Field(default=None, ge=1)
    playerNames: Optional[List[str]] = None

    def to_config(self) -> SchedulerConfig:
        return SchedulerConfig(
            num_players=self.numPlayers,
            rounds=self.rounds,
            player_names=self.playerNames,
        )


@app.get("/health")
def health_check():
    return {"status": "healthy", "message": "Scheduler service is running"}


@app.post("/schedule")
def generate(request: ScheduleRequest):
    """Generate a schedule and return rounds plus per-player statistics."""
    print(f"Received schedule request: {request.numPlayers} players, rounds={request.rounds}")

    try:
        config = request.to_config()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    try:
        schedule = build_schedule(config.num_players, config.resolved_rounds())
        violations = validate_schedule(schedule)
        content = schedule.to_dict()
        content.update({
            "success": not violations['errors'],
            "warnings": violations['warnings'],
            "summary": schedule.get_summary_stats(),
        })
        return JSONResponse(content=content)
    except Exception as e:
        print(f"Schedule generation failed: {str(e)}")
        import traceback
        traceback.print_exc()
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/schedule/excel")
def generate_excel(request: ScheduleRequest):
    """Generate a schedule and return it as an Excel workbook."""
    print(f"Received Excel request: {request.numPlayers} players, rounds={request.rounds}")

    try:
        config = request.to_config()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    try:
        schedule = build_schedule(config.num_players, config.resolved_rounds())
        buffer = BytesIO()
        write_excel(schedule, config, buffer)
        return Response(
            content=buffer.getvalue(),
            media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            headers={"Content-Disposition": 'attachment; filename="schedule.xlsx"'},
        )
    except Exception as e:
        print(f"Excel export failed: {str(e)}")
        import traceback
        traceback.print_exc()
        raise HTTPException(status_code=500, detail=str(e))
