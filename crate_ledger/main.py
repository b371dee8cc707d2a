"""
Ladenkonto (Crate Ledger) - FastAPI Backend
Hauptanwendung und Router-Konfiguration
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from crate_ledger.config import get_settings
from crate_ledger.database import Base, get_engine
from crate_ledger.exceptions import ConfigurationMissing, StoreError, RecordNotFound, DuplicateRecord
from crate_ledger.api.v1 import auth, partners, crate_types, movements, balances

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup und Shutdown Events"""
    # Startup: Tabellen erstellen (für Entwicklung)
    # In Produktion: Alembic Migrations verwenden
    try:
        Base.metadata.create_all(bind=get_engine())
    except ConfigurationMissing as e:
        logger.warning(f"Datenspeicher nicht konfiguriert: {e}")
    yield


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    ## Ladenkonto API

    Erfasst Mehrwegladen, die an Partner ausgegeben und zurückgebracht werden,
    und berechnet laufende Salden je Partner und Ladentyp.

    ### Authentifizierung
    PIN-Anmeldung unter `/api/v1/auth/login`, danach Bearer Token.
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Health Check
@app.get("/health", tags=["System"])
async def health_check():
    """Systemstatus prüfen."""
    return {"status": "healthy", "version": settings.app_version}


@app.get("/", tags=["System"])
async def root():
    """API Root - Zeigt Willkommensnachricht"""
    return {
        "message": "Willkommen beim Ladenkonto",
        "version": settings.app_version,
        "docs": "/docs",
    }


# API Router einbinden
app.include_router(auth.router, prefix="/api/v1")
app.include_router(partners.router, prefix="/api/v1")
app.include_router(crate_types.router, prefix="/api/v1")
app.include_router(movements.router, prefix="/api/v1")
app.include_router(balances.router, prefix="/api/v1")


# Exception Handler
@app.exception_handler(ConfigurationMissing)
async def configuration_missing_handler(request: Request, exc: ConfigurationMissing):
    """Einrichtungshinweise statt Stacktrace"""
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "detail": "Einrichtung erforderlich: Datenspeicher nicht konfiguriert.",
            "missing": exc.missing,
            "setup": [
                f"Umgebungsvariable {name} setzen (oder in .env eintragen)" for name in exc.missing
            ] + ["Tabellen anlegen: alembic upgrade head", "Danach den Dienst neu starten."],
        }
    )


@app.exception_handler(RecordNotFound)
async def record_not_found_handler(request: Request, exc: RecordNotFound):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})


@app.exception_handler(DuplicateRecord)
async def duplicate_record_handler(request: Request, exc: DuplicateRecord):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": exc.message})


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    """Fehlermeldung des Speichers unverändert an den Benutzer"""
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": exc.message})


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Globaler Exception Handler"""
    logger.error(f"Unbehandelter Fehler: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Ein interner Fehler ist aufgetreten.",
            "error": str(exc) if settings.debug else None
        }
    )
