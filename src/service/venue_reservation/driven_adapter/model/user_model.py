from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class UserModel(Base):
    __tablename__ = 'user'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    nickname: Mapped[str] = mapped_column(String(255), nullable=False, default='')
    state: Mapped[str] = mapped_column(String(20), nullable=False, default='ACTIVE')

    def __repr__(self):
        return f'<UserModel(id={self.id}, email={self.email})>'
