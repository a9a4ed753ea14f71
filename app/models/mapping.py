from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.utils.tokens import SHORT_LENGTH
from app.utils.validators import MAX_URL_LENGTH


class UrlMapping(Base):
    __tablename__ = "mappings"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    long_url: Mapped[str] = mapped_column(String(MAX_URL_LENGTH), unique=True, index=True)
    short_token: Mapped[str] = mapped_column(String(SHORT_LENGTH), unique=True, index=True)
