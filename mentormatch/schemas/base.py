from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Shared configuration for API bodies.

    Fields are declared in snake_case and exchanged as camelCase on the wire;
    either spelling is accepted on input. ORM rows can be passed directly.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
