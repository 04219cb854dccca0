from fastapi import FastAPI
import uvicorn

from seatify.api.calendar import router as calendar_router
from seatify.config import settings
from seatify.logging import configure_logging

configure_logging(settings.LOG_LEVEL)

app = FastAPI()
app.include_router(calendar_router)


@app.get("/ping")
async def ping():
    return {"message": "pong"}


if __name__ == "__main__":
    uvicorn.run("seatify.main:app", host="0.0.0.0", port=8000, reload=True)
