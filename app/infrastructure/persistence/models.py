# app/infrastructure/persistence/models.py
import uuid
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class Usuario(Base):
    __tablename__ = "usuarios"

    id = Column(String(36), primary_key=True, default=_new_id)
    nombre = Column(String(120), nullable=False)
    email = Column(String(254), nullable=False, unique=True, index=True)
    password_hash = Column(String(128), nullable=False)
    rol = Column(String(20), nullable=False, default="user")
    activo = Column(Boolean, nullable=False, default=True)
    creado_en = Column(DateTime, default=datetime.now)
    actualizado_en = Column(DateTime, default=datetime.now, onupdate=datetime.now)


class Cliente(Base):
    __tablename__ = "clientes"

    id = Column(String(36), primary_key=True, default=_new_id)
    identificacion_fiscal = Column(String(30), nullable=False, unique=True, index=True)
    nombre = Column(String(200), nullable=False)
    email = Column(String(254), nullable=False, unique=True, index=True)
    telefono = Column(String(30))
    calle = Column(String(200))
    ciudad = Column(String(100))
    estado = Column(String(100))
    codigo_postal = Column(String(20))
    pais = Column(String(100), default="México")
    activo = Column(Boolean, nullable=False, default=True)
    creado_en = Column(DateTime, default=datetime.now)
    actualizado_en = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    facturas = relationship("Factura", back_populates="cliente")


class Producto(Base):
    __tablename__ = "productos"

    id = Column(String(36), primary_key=True, default=_new_id)
    codigo = Column(String(50), nullable=False, unique=True, index=True)
    nombre = Column(String(200), nullable=False)
    descripcion = Column(Text)
    precio = Column(Float, nullable=False)
    tasa_impuesto = Column(Float, nullable=False, default=0)
    unidad = Column(String(30), nullable=False)
    stock = Column(Float, nullable=False, default=0)
    categoria = Column(String(100))
    activo = Column(Boolean, nullable=False, default=True)
    creado_en = Column(DateTime, default=datetime.now)
    actualizado_en = Column(DateTime, default=datetime.now, onupdate=datetime.now)


class Factura(Base):
    __tablename__ = "facturas"

    id = Column(String(36), primary_key=True, default=_new_id)
    # El índice único es la garantía real contra números duplicados
    numero_factura = Column(String(50), nullable=False, unique=True, index=True)
    fecha_emision = Column(DateTime, nullable=False, default=datetime.now)
    fecha_vencimiento = Column(DateTime, nullable=False)
    cliente_id = Column(String(36), ForeignKey("clientes.id"), nullable=False, index=True)
    subtotal = Column(Float, nullable=False)
    monto_impuesto = Column(Float, nullable=False)
    total = Column(Float, nullable=False)
    estado = Column(String(20), nullable=False, default="emitida", index=True)
    metodo_pago = Column(String(20), nullable=False, default="efectivo")
    notas = Column(Text)
    creado_en = Column(DateTime, default=datetime.now)
    actualizado_en = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    cliente = relationship("Cliente", back_populates="facturas")
    items = relationship(
        "ItemFactura",
        back_populates="factura",
        order_by="ItemFactura.posicion",
        cascade="all, delete-orphan"
    )


class ItemFactura(Base):
    __tablename__ = "items_factura"

    id = Column(Integer, primary_key=True, autoincrement=True)
    factura_id = Column(String(36), ForeignKey("facturas.id", ondelete="CASCADE"), nullable=False, index=True)
    posicion = Column(Integer, nullable=False)
    producto_id = Column(String(36), ForeignKey("productos.id"), nullable=False, index=True)
    descripcion = Column(String(500), nullable=False)
    cantidad = Column(Float, nullable=False)
    precio_unitario = Column(Float, nullable=False)
    tasa_impuesto = Column(Float, nullable=False, default=0)
    subtotal = Column(Float, nullable=False)
    monto_impuesto = Column(Float, nullable=False)
    total = Column(Float, nullable=False)

    factura = relationship("Factura", back_populates="items")
    producto = relationship("Producto")
