"""ORM models for the photographer's business records: clients, equipment and calendar events."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text

from photodesk.models.base import Base


class Client(Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(64), nullable=True)
    vat_number = Column(String(64), nullable=True)
    address = Column(Text, nullable=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    notes = Column(Text, nullable=True)


class Equipment(Base):
    """Equipment item; status is 'available', 'in_use' or 'maintenance'."""

    __tablename__ = "equipment"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    type = Column(String(100), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    status = Column(String(32), nullable=False, default="available")


class Event(Base):
    """Calendar booking, independent of photo jobs."""

    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="SET NULL"), nullable=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # JSON rather than a PostgreSQL array so the same models run on SQLite.
    equipment_ids = Column(JSON, nullable=True)
    notes = Column(Text, nullable=True)


class EquipmentPreset(Base):
    """Named bundle of the owner's equipment ids, picked as a unit when planning a shoot."""

    __tablename__ = "equipment_presets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    type = Column(String(100), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    equipment_ids = Column(JSON, nullable=False, default=list)
