"""
Connector: options or MONGODB_URI -> resolved URI -> driver handshake -> handle.
attempt() returns a ConnectOutcome and never logs; connect() logs the outcome and raises on failure.
Driver errors are re-raised as the same object, never wrapped or retried.
"""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from mongo_connect.config.logging import get_logger
from mongo_connect.config.settings import Settings
from mongo_connect.config.storage.models import ConnectOptions
from mongo_connect.config.storage.mongo import get_mongo_config
from mongo_connect.resources.mongo.client import BaseMongoDriver, MotorDriver
from mongo_connect.resources.mongo.errors import ConfigurationError

logger = get_logger(__name__)

ErrorKind = Literal["configuration", "connection"]


class ConnectOutcome(BaseModel):
    """Result of one connect attempt: a handle or the error that prevented it."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # May carry credentials; kept out of repr
    uri: str | None = Field(default=None, repr=False)
    db_name: str | None = None
    handle: Any = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> ErrorKind | None:
        if self.error is None:
            return None
        if isinstance(self.error, ConfigurationError):
            return "configuration"
        return "connection"

    def unwrap(self) -> Any:
        """Return the handle, or raise the stored error unchanged."""
        if self.error is not None:
            raise self.error
        return self.handle


def _coerce_options(options: ConnectOptions | Mapping[str, Any] | None) -> ConnectOptions | None:
    if options is None or isinstance(options, ConnectOptions):
        return options
    return ConnectOptions.model_validate(dict(options))


class Connector:
    """Resolves the MongoDB URI and delegates the handshake to a driver."""

    def __init__(self, settings: Settings | None = None, driver: BaseMongoDriver | None = None):
        self.settings = settings
        self.driver = driver or MotorDriver()

    async def attempt(self, options: ConnectOptions | Mapping[str, Any] | None = None) -> ConnectOutcome:
        """Try to connect once. Errors are captured in the outcome, not raised."""
        opts = _coerce_options(options)
        try:
            cfg = get_mongo_config(opts, self.settings)
        except ConfigurationError as e:
            return ConnectOutcome(db_name=opts.db_name if opts else None, error=e)

        try:
            handle = await self.driver.connect(cfg["uri"], db_name=cfg["database"])
        except Exception as e:
            return ConnectOutcome(uri=cfg["uri"], db_name=cfg["database"], error=e)
        return ConnectOutcome(uri=cfg["uri"], db_name=cfg["database"], handle=handle)

    async def connect(self, options: ConnectOptions | Mapping[str, Any] | None = None) -> Any:
        """Connect and return the driver handle. Failures are logged, then re-raised as-is."""
        outcome = await self.attempt(options)
        log_outcome(outcome)
        return outcome.unwrap()


def log_outcome(outcome: ConnectOutcome) -> None:
    """Emit one line per attempt. The URI is not logged since it may carry credentials."""
    if outcome.ok:
        logger.info("MongoDB connected successfully", extra={"database": outcome.db_name})
        return
    logger.error(
        "MongoDB connection error: %s",
        outcome.error,
        extra={"error_kind": outcome.error_kind, "error_type": type(outcome.error).__name__},
    )


async def connect_mongo(
    options: ConnectOptions | Mapping[str, Any] | None = None,
    settings: Settings | None = None,
    driver: BaseMongoDriver | None = None,
) -> Any:
    """
    Connect to MongoDB using options, falling back to MONGODB_URI from the environment or .env.
    The success line is logged at INFO; call configure_logging() first, or configure the
    "mongo_connect" logger yourself, to see it.
    """
    return await Connector(settings=settings, driver=driver).connect(options)
