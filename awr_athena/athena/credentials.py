"""Credential sources turned into Athena JDBC driver properties.

The JDBC driver resolves credentials itself when it is given a provider class
name. The default source only names the AWS default provider chain (explicit
config, environment variables, the shared credentials file, then instance role
metadata). The other sources resolve or validate credentials with boto3 before
the driver is involved, which keeps connection setup testable with a fake
session.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Protocol

import boto3
from botocore.exceptions import BotoCoreError, ProfileNotFound

from awr_athena.common.errors import AthenaConnectionError
from awr_athena.common.log import get_logger

LOGGER = get_logger(__name__)

_SHADED_AUTH = "com.amazonaws.athena.jdbc.shaded.com.amazonaws.auth"
DEFAULT_CREDENTIALS_PROVIDER_CLASS = f"{_SHADED_AUTH}.DefaultAWSCredentialsProviderChain"
PROFILE_CREDENTIALS_PROVIDER_CLASS = f"{_SHADED_AUTH}.profile.ProfileCredentialsProvider"


class CredentialSource(Protocol):
    def driver_properties(self) -> Dict[str, str]:
        ...


@dataclass(slots=True, frozen=True)
class ProviderChainCredentials:
    """Let the driver walk the AWS default credential provider chain."""

    provider_class: str = DEFAULT_CREDENTIALS_PROVIDER_CLASS

    def driver_properties(self) -> Dict[str, str]:
        return {"aws_credentials_provider_class": self.provider_class}


@dataclass(slots=True, frozen=True)
class ProfileCredentials:
    """Use a named profile from the shared AWS config files."""

    profile_name: str

    def driver_properties(self) -> Dict[str, str]:
        try:
            available = boto3.session.Session(profile_name=self.profile_name).available_profiles
        except ProfileNotFound as exc:
            LOGGER.error("AWS profile not found", extra={"profile": self.profile_name})
            raise AthenaConnectionError(str(exc)) from exc
        if self.profile_name not in available:
            LOGGER.error("AWS profile not found", extra={"profile": self.profile_name})
            raise AthenaConnectionError(f"The config profile ({self.profile_name}) could not be found")
        return {
            "aws_credentials_provider_class": PROFILE_CREDENTIALS_PROVIDER_CLASS,
            "aws_credentials_provider_arguments": self.profile_name,
        }


@dataclass(slots=True)
class SessionCredentials:
    """Resolve long-lived keys through a boto3 session and pass them as user/password."""

    session: Any

    @classmethod
    def from_environment(cls, region: str | None = None, profile_name: str | None = None) -> "SessionCredentials":
        return cls(session=boto3.session.Session(region_name=region, profile_name=profile_name))

    def driver_properties(self) -> Dict[str, str]:
        try:
            credentials = self.session.get_credentials()
        except BotoCoreError as exc:
            LOGGER.error("Credential resolution failed", extra={"error": str(exc)})
            raise AthenaConnectionError(str(exc)) from exc
        if credentials is None:
            raise AthenaConnectionError("Unable to locate AWS credentials")
        frozen = credentials.get_frozen_credentials()
        if frozen.token:
            # The driver has no property for a session token.
            raise AthenaConnectionError(
                "Temporary AWS credentials cannot be passed as user/password; use ProviderChainCredentials instead"
            )
        return {"user": frozen.access_key, "password": frozen.secret_key}


__all__ = [
    "CredentialSource",
    "DEFAULT_CREDENTIALS_PROVIDER_CLASS",
    "PROFILE_CREDENTIALS_PROVIDER_CLASS",
    "ProfileCredentials",
    "ProviderChainCredentials",
    "SessionCredentials",
]
