"""Action wrapper: identity gate, input parsing and the success envelope."""

import functools
import logging
import uuid
from typing import Any, Awaitable, Callable, Optional, Sequence, TypeVar

from pydantic import ValidationError as PydanticValidationError

from config.exceptions import EmptyUpdateError, NotFoundError, ValidationError
from actions.context import ActionContext, UserIdentity
from actions.identity import require_user
from models.inputs import ActionInput, PatchInput

logger = logging.getLogger(__name__)

T = TypeVar("T")
Handler = Callable[[ActionContext, UserIdentity, Any], Awaitable[dict]]


def new_id() -> str:
    return str(uuid.uuid4())


def ok(**data: Any) -> dict:
    """Wrap a payload in the success envelope."""
    if not data:
        return {"success": True}
    return {"success": True, "data": data}


def first(rows: Sequence[T], message: str) -> T:
    """Return the single affected row, or NotFound if it vanished mid-call."""
    if not rows:
        raise NotFoundError(message)
    return rows[0]


def _describe(exc: PydanticValidationError) -> tuple[str, list[str]]:
    fields, messages = [], []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error["loc"]) or "input"
        fields.append(loc)
        messages.append(f"{loc}: {error['msg']}")
    return "; ".join(messages), fields


def parse_input(model: type[ActionInput], payload: Any) -> ActionInput:
    """Validate ``payload`` against ``model``.

    Schema failures and empty partial updates both surface as
    ``ValidationError`` so no storage access happens for bad input.
    """
    if isinstance(payload, model):
        data = payload
    else:
        try:
            data = model.model_validate(payload or {})
        except PydanticValidationError as exc:
            message, fields = _describe(exc)
            raise ValidationError(message, {"fields": ", ".join(fields)}) from exc

    if isinstance(data, PatchInput) and not data.changes():
        raise EmptyUpdateError()
    return data


class Action:
    """An operation callable as ``await action(ctx, payload)`` or ``await action(ctx, **fields)``."""

    def __init__(self, name: str, input_model: type[ActionInput], handler: Handler):
        self.name = name
        self.input_model = input_model
        self.handler = handler
        functools.update_wrapper(self, handler)

    def __repr__(self) -> str:
        return f"<Action {self.name}>"

    async def __call__(self, context: ActionContext, payload: Optional[Any] = None, /, **fields: Any) -> dict:
        user = require_user(context)
        if fields:
            if isinstance(payload, ActionInput):
                raise TypeError("Pass either an input model or keyword fields, not both")
            payload = {**(payload or {}), **fields}
        data = parse_input(self.input_model, payload)
        logger.debug("Dispatching %s for user %s", self.name, user.id)
        return await self.handler(context, user, data)


def define_action(name: str, input_model: type[ActionInput]) -> Callable[[Handler], Action]:
    """Register ``handler`` as the operation ``name`` taking ``input_model``."""
    def decorator(handler: Handler) -> Action:
        return Action(name, input_model, handler)
    return decorator
