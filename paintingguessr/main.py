# ABOUTME: Main NiceGUI web application entry point
# ABOUTME: Serves the daily challenge, custom painting sets and the daily countdown as JSON

import asyncio
import logging
from typing import Optional

from nicegui import app, ui

from paintingguessr.config import Config
from paintingguessr.orchestrator import AppOrchestrator
from paintingguessr.paintings.source import SOURCE_MET

log = logging.getLogger(__name__)

# Initialize orchestrator
orchestrator = AppOrchestrator()


@app.get('/api/daily')
def daily():
    """Today's five paintings, identical for every player until reference midnight"""
    return orchestrator.get_daily()


@app.get('/api/paintings')
def paintings(count: Optional[str] = None, source: str = SOURCE_MET):
    """Unseeded set for a personal game; bad counts are clamped rather than rejected"""
    return orchestrator.get_paintings(count=count, source=source)


@app.get('/api/daily/countdown')
def daily_countdown():
    return orchestrator.get_countdown()


async def warmup():
    """Fill the catalog id cache in the background after startup"""
    try:
        loop = asyncio.get_event_loop()
        await loop.run_in_executor(None, orchestrator.warmup_cache)
    except Exception:
        log.exception("Warmup failed, ids will be loaded on first request")


app.on_startup(warmup)


if __name__ in {"__main__", "__mp_main__"}:
    logging.basicConfig(level=logging.DEBUG if Config.DEBUG else logging.INFO)
    ui.run(
        title='PaintingGuessr',
        host='0.0.0.0',
        port=Config.PORT,
        reload=False  # Disable reload in production
    )
