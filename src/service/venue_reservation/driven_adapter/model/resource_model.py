from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class SpaceModel(Base):
    __tablename__ = 'space'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    state: Mapped[str] = mapped_column(String(20), nullable=False, default='ACTIVE')


class ChairModel(Base):
    __tablename__ = 'chair'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    manage_id: Mapped[str] = mapped_column(String(50), nullable=False)
    space_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey('space.id'), nullable=True, index=True
    )
    state: Mapped[str] = mapped_column(String(20), nullable=False, default='ACTIVE')
