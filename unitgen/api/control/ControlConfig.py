"""Control plane configuration with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from ._noop._Data import _Data as _NoopData
from ._systemd._Data import _Data as _SystemdData

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "noop": _NoopData,
    "systemd": _SystemdData,
}


class ControlConfig(BaseModel):
    """Control plane configuration with backend-specific data."""

    type: str = Field(..., description="Service manager backend type")
    data: BaseModel = Field(..., description="Backend-specific configuration data")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"control config must be a dict, got {type(values).__name__}")
        backend_type = values.get("type")
        if not backend_type:
            raise ValueError("control.type is required")
        config_data_class = _BACKEND_REGISTRY.get(backend_type)
        if not config_data_class:
            raise ValueError(f"Unknown control type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data_dict = values.get("data")
        if data_dict is None:
            raise ValueError("control.data is required")
        if isinstance(data_dict, config_data_class):
            return values
        values = dict(values)
        values["data"] = config_data_class(**data_dict)
        return values

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize nested data model."""
        result = super().model_dump(**kwargs)
        # data is typed as BaseModel, so its fields are not dumped by default
        if isinstance(self.data, BaseModel):
            result["data"] = self.data.model_dump(**kwargs)
        return result
