from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from .core.database import create_db_and_tables
from .core.settings import settings
from .models.Operator import Operator # Import models to register them with SQLModel
from .models.OperatorSession import OperatorSession
from .models.Account import Account
from .models.RevokedToken import RevokedToken
from .models.Audit import AuditLog
from .core.init_db import init_db

from .auth.router import router as auth_router
from .accounts.router import router as accounts_router
from .access.router import router as access_router
from .revocations.router import router as revocations_router
from .audit.router import router as audit_router

def configure_logging():
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    create_db_and_tables()
    init_db()
    yield



app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

app.include_router(auth_router)
app.include_router(accounts_router)
app.include_router(access_router)
app.include_router(revocations_router)
app.include_router(audit_router)

@app.get("/")
def read_root():
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}
