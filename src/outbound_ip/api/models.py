"""Pydantic models for API response schemas."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PublicIPResponse(APIModel):
    """Public IP resolved successfully."""

    ok: bool = Field(default=True, examples=[True])
    method: str = Field(examples=["dns-lookup"])
    ip: str = Field(examples=["34.202.126.158"])
    hostname: str = Field(examples=["ec2-34-202-126-158.compute-1.amazonaws.com"])


class ResolutionErrorResponse(APIModel):
    """The DNS lookup failed."""

    ok: bool = Field(default=False, examples=[False])
    error: str = Field(examples=["Failed to determine AWS public IP"])
    message: str = Field(examples=["[Errno -2] Name or service not known"])


class InvalidAddressResponse(APIModel):
    """The DNS lookup did not return an IPv4 address."""

    ok: bool = Field(default=False, examples=[False])
    error: str = Field(examples=["DNS lookup did not return a valid IPv4 address"])
    hostname: str
    raw: dict[str, Any] = Field(examples=[{"address": "2001:db8::1", "family": 6}])


class ClientIPResponse(APIModel):
    """Caller IP as seen by the service."""

    ok: bool = Field(default=True, examples=[True])
    caller_ip: str = Field(examples=["203.0.113.10"])
    forwarded_for: Optional[str] = Field(examples=["203.0.113.10, 10.0.0.1"])
    user_agent: Optional[str] = Field(examples=["curl/8.0.1"])
    request_id: str = Field(examples=["a1b2c3d4"])
