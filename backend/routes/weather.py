"""Sample weather forecast route from the project template."""

import datetime
import random

from fastapi import APIRouter

from models import WeatherForecastModel

router = APIRouter()

SUMMARIES = [
    "Freezing", "Bracing", "Chilly", "Cool", "Mild", "Warm", "Balmy", "Hot", "Sweltering", "Scorching",
]


def make_forecast(days: int = 5, rng: random.Random | None = None) -> list[WeatherForecastModel]:
    rng = rng or random.Random()
    today = datetime.date.today()
    return [
        WeatherForecastModel.build(
            day=today + datetime.timedelta(days=index),
            temperature_c=rng.randrange(-20, 55),
            summary=rng.choice(SUMMARIES),
        )
        for index in range(1, days + 1)
    ]


@router.get("/weatherforecast", name="GetWeatherForecast", response_model=list[WeatherForecastModel])
async def weather_forecast() -> list[WeatherForecastModel]:
    return make_forecast()
