"""Auth Schemas — OAuth2 client credentials file format.

Invariants:
    - clientid and secret are both required and non-empty
"""

from pydantic import BaseModel, Field


class OAuthCredentials(BaseModel):
    """Contents of the provider credentials JSON file."""
    client_id: str = Field(alias="clientid", min_length=1)
    client_secret: str = Field(alias="secret", min_length=1)
