from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


class ReservationModel(Base):
    __tablename__ = 'reservation'
    __table_args__ = (
        Index('ix_reservation_user_status', 'user_id', 'status'),
        Index('ix_reservation_resource_end', 'resource_kind', 'resource_id', 'end_schedule'),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    resource_kind: Mapped[str] = mapped_column(String(10), nullable=False)  # CHAIR | SPACE
    resource_id: Mapped[int] = mapped_column(Integer, nullable=False)
    start_schedule: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_schedule: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default='PENDING')
    state: Mapped[str] = mapped_column(String(20), nullable=False, default='ACTIVE')
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), nullable=False)

    # Bumped on every status write; updates are conditional on the version read
    __mapper_args__ = {'version_id_col': version}
