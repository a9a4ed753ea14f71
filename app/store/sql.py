"""
SQLAlchemy mapping store.

Each operation opens its own session from the injected factory and closes
it on exit, returning the connection to the engine's pool. Conflicts are
detected only by the database's unique indexes at commit time.
"""
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from app.models.mapping import UrlMapping
from app.store.base import Mapping, MappingStore
from app.store.exceptions import UniquenessViolation


class SqlAlchemyMappingStore(MappingStore):
    """
    Mapping store backed by the `mappings` table.

    Example:
        >>> store = SqlAlchemyMappingStore(SessionLocal)
        >>> store.insert("https://example.com/", "abcdefghij")
        Mapping(long_url='https://example.com/', short_token='abcdefghij')
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        """
        Initialize SQL mapping store.

        Args:
            session_factory: Session factory bound to the target engine
        """
        self._session_factory = session_factory

    def find_by_long(self, long_url: str) -> Mapping | None:
        with self._session_factory() as session:
            row = session.execute(
                select(UrlMapping).where(UrlMapping.long_url == long_url)
            ).scalar_one_or_none()
            return _to_mapping(row)

    def find_by_short(self, short_token: str) -> Mapping | None:
        with self._session_factory() as session:
            row = session.execute(
                select(UrlMapping).where(UrlMapping.short_token == short_token)
            ).scalar_one_or_none()
            return _to_mapping(row)

    def insert(self, long_url: str, short_token: str) -> Mapping:
        with self._session_factory() as session:
            session.add(UrlMapping(long_url=long_url, short_token=short_token))
            try:
                session.commit()
            except IntegrityError as e:
                session.rollback()
                raise UniquenessViolation(long_url, short_token) from e

        return Mapping(long_url=long_url, short_token=short_token)

    def count(self) -> int:
        with self._session_factory() as session:
            return session.execute(select(func.count(UrlMapping.id))).scalar_one()


def _to_mapping(row: UrlMapping | None) -> Mapping | None:
    if row is None:
        return None
    return Mapping(long_url=row.long_url, short_token=row.short_token)
