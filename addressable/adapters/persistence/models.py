"""SQLAlchemy ORM models — maps to PostgreSQL tables."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from addressable.adapters.persistence.database import Base


class LocationModel(Base):
    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)

    # Address columns keep the names other consumers of this table expect.
    address: Mapped[str | None] = mapped_column("Address", String(255), nullable=True)
    city: Mapped[str | None] = mapped_column("City", String(64), nullable=True)
    state: Mapped[str | None] = mapped_column("State", String(64), nullable=True)
    postcode: Mapped[str | None] = mapped_column("Postcode", String(10), nullable=True)
    country: Mapped[str | None] = mapped_column("Country", String(2), nullable=True)

    lat: Mapped[float | None] = mapped_column("Lat", Float, nullable=True)
    lng: Mapped[float | None] = mapped_column("Lng", Float, nullable=True)
    geo_status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
