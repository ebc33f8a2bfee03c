from sqlalchemy import Column, Integer, String, Text
from .base import Base, IdentifierType


class Villain(Base):
    __tablename__ = 'villain'
    id = Column(IdentifierType, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    other_name = Column(String(255), nullable=True)
    level = Column(Integer, nullable=False)
    picture = Column(String(255), nullable=True)
    powers = Column(Text, nullable=True)

    def __repr__(self) -> str:
        return (
            f"Villain(id={self.id!r}, name={self.name!r}, other_name={self.other_name!r}, "
            f"level={self.level!r}, picture={self.picture!r})"
        )
