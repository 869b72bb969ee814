"""MongoDB connection config resolution. Read-only; no I/O."""

from typing import Any

from mongo_connect.config.settings import Settings
from mongo_connect.config.storage.models import ConnectOptions
from mongo_connect.resources.mongo.errors import ConfigurationError

MISSING_URI_MESSAGE = "MongoDB URI not provided. Set MONGODB_URI in .env file or pass as parameter"


def get_mongo_config(
    options: ConnectOptions | None = None,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """
    Resolve connection parameters. An explicit options.uri wins over MONGODB_URI.
    Without an explicit settings object, MONGODB_URI is read fresh from the environment
    and .env on each call, and only when the options do not carry a URI.
    Raises ConfigurationError when neither source yields a non-empty URI.
    """
    uri = options.uri if options is not None else None
    if not uri:
        uri = (settings or Settings()).mongodb_uri
    if not uri:
        raise ConfigurationError(MISSING_URI_MESSAGE)
    return {
        "uri": uri,
        "database": options.db_name if options is not None else None,
    }
