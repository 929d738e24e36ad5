from pydantic import AliasChoices, BaseModel, Field, field_serializer
from datetime import datetime, timezone
from typing import Optional, Union


# Request Schemas
class WalletRequest(BaseModel):
    """Body of create and update. Missing fields bind to their zero value.

    Binding is strict: no coercion of strings or booleans into numbers. A
    whole number is still accepted for ``balance``.
    """
    user_id: int = Field(0, validation_alias=AliasChoices("user_id", "UserID"))
    user_name: str = Field("", validation_alias=AliasChoices("user_name", "UserName"))
    wallet_name: str = Field("", validation_alias=AliasChoices("wallet_name", "WalletName"))
    wallet_type: str = Field("", validation_alias=AliasChoices("wallet_type", "WalletType"))
    balance: float = Field(0, validation_alias=AliasChoices("balance", "Balance"))

    model_config = {
        "strict": True,
        "json_schema_extra": {
            "example": {
                "user_id": 1,
                "user_name": "John Doe",
                "wallet_name": "John Savings",
                "wallet_type": "Savings",
                "balance": 1000,
            }
        }
    }


# Response schema
class Wallet(BaseModel):
    id: int = Field(..., serialization_alias="ID")
    user_id: int = Field(0, serialization_alias="UserID")
    user_name: str = Field("", serialization_alias="UserName")
    wallet_name: str = Field("", serialization_alias="WalletName")
    wallet_type: str = Field("", serialization_alias="WalletType")
    balance: float = Field(0, serialization_alias="Balance")
    created_at: Optional[datetime] = Field(None, serialization_alias="CreatedAt")

    model_config = {
        "from_attributes": True
    }

    @field_serializer("balance", when_used="json")
    def serialize_balance(self, value: float) -> Union[int, float]:
        # 1000.0 goes out as 1000
        return int(value) if value.is_integer() else value

    @field_serializer("created_at", when_used="json")
    def serialize_created_at(self, value: Optional[datetime]) -> Optional[str]:
        """RFC 3339 in UTC. Naive values are stored as UTC already."""
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


class ErrorResponse(BaseModel):
    message: str
