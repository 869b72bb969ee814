"""Connection option models. Read-only; no business logic."""

from pydantic import BaseModel, ConfigDict, Field


class ConnectOptions(BaseModel):
    """Per-call connection options. Both fields optional."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    uri: str | None = Field(default=None, description="MongoDB connection URI; overrides MONGODB_URI")
    db_name: str | None = Field(default=None, alias="dbName", description="Database to select after connecting")
