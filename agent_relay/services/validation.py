"""
Validation of untrusted tool-call arguments.

Arguments come from a probabilistic model, so they are checked against the
tool's pydantic input model before execution. Unknown fields are rejected by
the input models; optional fields that were not sent stay absent.
"""
import json
import logging
from typing import Any, Dict, List, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from agent_relay.domains.errors import ToolValidationError
from agent_relay.interfaces.services.tools import (
    SchemaValidator as SchemaValidatorInterface,
)

logger = logging.getLogger(__name__)


def describe_errors(error: PydanticValidationError) -> List[str]:
    """Turn pydantic errors into ``field: reason`` lines."""
    problems = []
    for err in error.errors():
        location = ".".join(str(part) for part in err.get("loc", ())) or "arguments"
        kind = err.get("type", "")
        if kind == "missing":
            reason = "required field is missing"
        elif kind == "extra_forbidden":
            reason = "unknown field is not allowed"
        else:
            reason = err.get("msg", "invalid value")
        problems.append(f"{location}: {reason}")
    return problems


class SchemaValidator(SchemaValidatorInterface):
    """Validates raw arguments against a pydantic input model."""

    def validate(
        self, shape: Type[BaseModel], raw_input: Any, tool_name: str = ""
    ) -> Dict[str, Any]:
        """Validate ``raw_input`` and return only the fields actually provided.

        Raises:
            ToolValidationError: naming each failing field and why
        """
        if raw_input is None or raw_input == "":
            raw_input = {}
        if isinstance(raw_input, str):
            try:
                raw_input = json.loads(raw_input)
            except json.JSONDecodeError as e:
                raise ToolValidationError(
                    tool_name, [f"arguments: not valid JSON ({e.msg})"]
                ) from e
        if not isinstance(raw_input, dict):
            raise ToolValidationError(
                tool_name,
                [f"arguments: expected an object, got {type(raw_input).__name__}"],
            )

        try:
            validated = shape.model_validate(raw_input)
        except PydanticValidationError as e:
            problems = describe_errors(e)
            logger.warning(f"Validation failed for tool '{tool_name}': {problems}")
            raise ToolValidationError(tool_name, problems) from e
        except Exception as e:
            # pydantic only wraps ValueError and AssertionError from predicates
            logger.exception(f"Validator of tool '{tool_name}' raised: {e}")
            raise ToolValidationError(
                tool_name, [f"arguments: {type(e).__name__}: {e}"]
            ) from e

        return validated.model_dump(exclude_unset=True)
