import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from staybook.api.v1.booking_forms import router as booking_forms_router
from staybook.api.v1.properties import router as properties_router
from staybook.core.config import settings
from staybook.wiring.dependencies import close_clients

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("form_id", "property_id", "booking_id", "field", "status", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_clients()


app = FastAPI(title="Staybook Booking", version="1.0.0", lifespan=lifespan)

app.include_router(booking_forms_router, prefix="/api/v1", tags=["booking-forms"])
app.include_router(properties_router, prefix="/api/v1", tags=["properties"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
