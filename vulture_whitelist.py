"""Names vulture reports as unused that pydantic calls at validation time.

Decorated validators on Config are invoked by the model machinery, which
static analysis cannot see.
"""
# pylint: disable=all
# Pydantic field validators - used by framework via @field_validator decorator
_.canonical_operation  # noqa: F821  # unused method (stringext/core/config.py:41)
_.parse_string_list  # noqa: F821  # unused method (stringext/core/config.py:50)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_cross_fields  # noqa: F821  # unused method (stringext/core/config.py:59)
