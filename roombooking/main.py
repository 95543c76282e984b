from contextlib import asynccontextmanager
from fastapi import FastAPI
from roombooking.config import get_settings
from roombooking.db import init_database
from roombooking.logging_config import configure_logging
from roombooking.routers import admin, bookings, rooms
from roombooking.utils.error_handlers import register_error_handlers


@asynccontextmanager
async def lifespan(_: FastAPI):
    "lifespan for initing logging and database"
    configure_logging(get_settings().log_level)
    init_database()
    yield


app = FastAPI(
    lifespan=lifespan,
    title="Room booker",
    description="Room booking with conflict detection and day availability.",
    version="0.1.0",
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT",
    },
)

register_error_handlers(app)

app.include_router(bookings.router)
app.include_router(rooms.router)
app.include_router(admin.router)
