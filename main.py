from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
import uvicorn

from db.database import close_db, init_db
from env import CORS_ORIGINS, DATABASE_URL, PORT, check_required_env
from logger_manager import log_info
from routers.allergies import router as allergies_router
from routers.auth import router as auth_router
from routers.dishes import router as dishes_router
from routers.ingredients import router as ingredients_router
from routers.pending import router as pending_router
from routers.restaurants import router as restaurants_router
from routers.upload import router as upload_router
from routers.users import router as users_router
from utils.error_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Open the database once at startup and release it on shutdown
    check_required_env()
    init_db(app, DATABASE_URL)
    log_info("Server started")
    yield
    close_db(app)
    log_info("Server stopped")


app = FastAPI(title="Menu Recommender API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    log_info(f"Request: {request.method} {request.url} -> {response.status_code}")
    return response


@app.get("/", response_class=PlainTextResponse)
def read_root():
    return "Server is up!"


app.include_router(auth_router, prefix="/auth", tags=["Auth"])
app.include_router(users_router, prefix="/users", tags=["Users"])
app.include_router(allergies_router, prefix="/allergies", tags=["Allergies"])
app.include_router(ingredients_router, prefix="/ingredients", tags=["Ingredients"])
app.include_router(pending_router, prefix="/pending", tags=["Pending"])
app.include_router(restaurants_router, prefix="/restaurants", tags=["Restaurants"])
app.include_router(dishes_router, prefix="/dishes", tags=["Dishes"])
app.include_router(upload_router, prefix="/upload", tags=["Upload"])

# To run the FastAPI app, use the command: uvicorn main:app --reload
if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=PORT)
