"""Athena driver facade over the Athena JDBC driver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from awr_athena.athena.connection import AthenaConnection
from awr_athena.athena.credentials import CredentialSource, ProfileCredentials, ProviderChainCredentials
from awr_athena.athena.models import ATHENA_DRIVER_CLASS, ATHENA_IDENTIFIER_QUOTE, DriverIdentity, parse_settings
from awr_athena.athena.url import build_url
from awr_athena.common.config import ATHENA_MAX_FETCH_SIZE, AthenaSettings
from awr_athena.common.log import get_logger
from awr_athena.jdbc.bridge import JdbcDriver

LOGGER = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class AthenaDriver:
    """Open Athena connections through the bundled JDBC driver.

    Credentials are resolved by the driver through the AWS default provider
    chain unless another ``credentials`` source is given.
    """

    jars: Tuple[str, ...] = ()
    fetch_size: int = ATHENA_MAX_FETCH_SIZE
    credentials: CredentialSource = field(default_factory=ProviderChainCredentials)

    def __post_init__(self) -> None:
        if self.fetch_size < 1:
            raise ValueError(f"fetch_size must be positive, got {self.fetch_size}")

    @classmethod
    def from_config(cls, config: AthenaSettings) -> "AthenaDriver":
        credentials: CredentialSource = ProviderChainCredentials()
        if config.profile_name:
            credentials = ProfileCredentials(profile_name=config.profile_name)
        return cls(jars=tuple(config.driver_jars), fetch_size=config.fetch_size, credentials=credentials)

    @property
    def jdbc(self) -> JdbcDriver:
        return JdbcDriver(driver_class=ATHENA_DRIVER_CLASS, identifier_quote=ATHENA_IDENTIFIER_QUOTE, jars=self.jars)

    def identify(self) -> DriverIdentity:
        return DriverIdentity()

    def get_info(self) -> Dict[str, Any]:
        identity = self.identify()
        return {
            "driver_class": identity.driver_class,
            "identifier_quote": identity.identifier_quote,
            "jars": list(self.jars),
            "fetch_size": self.fetch_size,
        }

    def connect(self, region: str, s3_staging_dir: str, schema_name: str, **options: Any) -> AthenaConnection:
        """Open a connection to Athena in ``region``.

        Extra keyword options are passed to the JDBC driver as connection
        properties and take precedence over the defaults built here. See the
        Athena JDBC documentation for the accepted names.
        """
        settings = parse_settings(region=region, s3_staging_dir=s3_staging_dir, schema_name=schema_name, options=options)
        url = build_url(settings.region)
        properties: Dict[str, Any] = {
            **settings.driver_properties(),
            **self.credentials.driver_properties(),
            **settings.options,
        }
        LOGGER.info("Connecting to Athena", extra={"region": settings.region, "schema_name": settings.schema_name})
        connection = self.jdbc.connect(url, properties)
        return AthenaConnection(
            connection,
            region=settings.region,
            s3_staging_dir=settings.s3_staging_dir,
            schema_name=settings.schema_name,
            url=url,
            fetch_size=self.fetch_size,
        )

    def connect_from_config(self, config: AthenaSettings, **options: Any) -> AthenaConnection:
        return self.connect(
            region=config.region,
            s3_staging_dir=config.require_staging_dir(),
            schema_name=config.schema_name,
            **options,
        )


__all__ = ["AthenaDriver"]
