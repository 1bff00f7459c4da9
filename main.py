# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from app.infrastructure.api.error_handlers import register_exception_handlers
from app.infrastructure.persistence.database import init_db

# Importamos los routers de la capa de infraestructura
from app.infrastructure.api.routers import customers_router, invoices_router, products_router, users_router

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(levelname)s - [%(funcName)s] - %(message)s'
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logging.info("Base de datos lista.")
    yield


app = FastAPI(
    title="API de Facturación Electrónica",
    description="Administración de usuarios, clientes, productos y facturas.",
    version="1.0.0",
    lifespan=lifespan
)

# Configuración de CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(users_router.router)
app.include_router(customers_router.router)
app.include_router(products_router.router)
app.include_router(invoices_router.router)


@app.get("/", tags=["Health Check"])
def read_root():
    return {"status": "ok", "message": "Bienvenido a la API de Facturación Electrónica"}
