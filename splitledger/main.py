from contextlib import asynccontextmanager
from fastapi import FastAPI
from splitledger.api.v1.routes.system import router as system_router
from splitledger.api.v1.routes.group import router as group_router
from splitledger.api.v1.routes.expense import router as expense_router
from splitledger.api.v1.routes.settlement import router as settlement_router
from splitledger.api.v1.routes.balances import router as balances_router
from splitledger.core.config import settings
from splitledger.core.db_check import wait_for_db
from splitledger.core.logger import configure_logging
import splitledger.models  # noqa: F401

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    await wait_for_db()
    yield

app = FastAPI(title="Splitledger Backend", lifespan=lifespan)

@app.get("/")
async def root():
    return {"message": "Splitledger Backend is live"}

app.include_router(system_router, prefix="/api/v1/system")
app.include_router(group_router, prefix="/api/v1/groups")
app.include_router(expense_router, prefix="/api/v1/expenses")
app.include_router(settlement_router, prefix="/api/v1/settlements")
app.include_router(balances_router, prefix="/api/v1/balances")
