from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class WalkInModel(Base):
    __tablename__ = 'walk_in'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    resource_kind: Mapped[str] = mapped_column(String(10), nullable=False)
    resource_id: Mapped[int] = mapped_column(Integer, nullable=False)
    start_schedule: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_schedule: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    state: Mapped[str] = mapped_column(String(20), nullable=False, default='ACTIVE')


class OccupancyModel(Base):
    __tablename__ = 'occupancy'
    __table_args__ = (
        # Exactly one origin per occupancy
        CheckConstraint(
            '(reservation_id IS NULL) != (walk_in_id IS NULL)', name='ck_occupancy_single_source'
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    reservation_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey('reservation.id'), nullable=True, index=True
    )
    walk_in_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey('walk_in.id'), nullable=True, index=True
    )
    resource_kind: Mapped[str] = mapped_column(String(10), nullable=False)
    resource_id: Mapped[int] = mapped_column(Integer, nullable=False)
    start_schedule: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_schedule: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default='CHECK_IN')
    state: Mapped[str] = mapped_column(String(20), nullable=False, default='ACTIVE')
