from fastapi import FastAPI

from app.api.rest_routes.chat import router as chat_router
from app.api.rest_routes.crop_doctor import router as crop_doctor_router
from app.api.rest_routes.insights import router as insights_router
from app.api.rest_routes.mandi import router as mandi_router
from app.api.rest_routes.schemes import router as schemes_router
from app.api.rest_routes.ui import router as ui_router
from app.api.rest_routes.weather import router as weather_router

app = FastAPI(title="KisanSathi AI")

app.include_router(ui_router)
app.include_router(insights_router)
app.include_router(mandi_router)
app.include_router(weather_router)
app.include_router(schemes_router)
app.include_router(crop_doctor_router)
app.include_router(chat_router)


@app.get("/")
async def root():
    return {"message": "Welcome to KisanSathi AI, your farming companion!"}
