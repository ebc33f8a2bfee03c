from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Column ranges: `id` is BIGINT, `level` is INTEGER.
MAX_IDENTIFIER = 2**63 - 1
MIN_LEVEL = -2**31
MAX_LEVEL = 2**31 - 1


class VillainBase(BaseModel):
    name: str
    other_name: str | None = None
    level: int = Field(ge=MIN_LEVEL, le=MAX_LEVEL)
    picture: str | None = None
    powers: str | None = None
    # Request bodies only accept the camelCase wire names
    model_config = ConfigDict(alias_generator=to_camel)


class VillainCreate(VillainBase):
    # Accepted on the wire but never used; the store assigns identifiers.
    id: int | None = None


class VillainUpdate(VillainBase):
    id: int = Field(ge=1, le=MAX_IDENTIFIER)


class Villain(VillainBase):
    id: int | None = None
    # ORM attributes are read by field name, output is written by alias
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
