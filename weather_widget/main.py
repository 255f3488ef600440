import logging

import httpx
from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from weather_widget.config import settings
from weather_widget.services.openweather import OpenWeatherClient

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)

ow = OpenWeatherClient(settings.openweather_base_url, settings.openweather_api_key)


@app.get("/health")
def health():
    return {"status": "ok", "service": settings.app_name}


@app.get("/")
def root():
    return JSONResponse({"service": settings.app_name, "docs": "/docs"})


@app.get("/api/weather")
async def weather(
    city: str = Query(..., min_length=1, description="City name, e.g. 'Nairobi'"),
):
    """Proxy one current-conditions lookup to OpenWeather, no caching."""
    try:
        return await ow.get_current_by_city(city)
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        logger.warning("OpenWeather answered %s for %r", status, city)
        if status == 404:
            raise HTTPException(status_code=404, detail="City not found")
        raise HTTPException(status_code=502, detail=exc.response.text)
    except Exception as exc:
        logger.warning("OpenWeather lookup failed for %r", city, exc_info=True)
        raise HTTPException(status_code=502, detail=str(exc))
