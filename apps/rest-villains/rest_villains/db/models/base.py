"""
Shared SQLAlchemy base.
"""
from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import declarative_base


# SQLite only autoincrements INTEGER PRIMARY KEY columns
IdentifierType = BigInteger().with_variant(Integer(), "sqlite")

Base = declarative_base()
