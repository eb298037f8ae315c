"""Request validation decorator for Flask endpoints.

@validate_request reads the view function's signature. Any parameter
annotated with a Pydantic model is filled from the request body (JSON, or
form data for HTML forms). Path parameters pass through untouched.

    @auth_bp.post("/auth/login")
    @validate_request
    def login(data: LoginRequest):
        ...

Validation failures raise ValidationError (400) with the Pydantic error
list in details.
"""

import inspect
from functools import wraps

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError


def _model_params(func) -> dict[str, type[BaseModel]]:
    params = {}
    for name, param in inspect.signature(func).parameters.items():
        annotation = param.annotation
        if inspect.isclass(annotation) and issubclass(annotation, BaseModel):
            params[name] = annotation
    return params


def _request_payload() -> dict | None:
    if request.is_json:
        return request.get_json(silent=True)
    if request.form:
        return request.form.to_dict()
    return None


def _error_list(error: PydanticValidationError) -> list[dict]:
    return [
        {"loc": [str(part) for part in err["loc"]], "msg": err["msg"], "type": err["type"]}
        for err in error.errors()
    ]


def validate_request(func):
    """Validate the request body against the view's Pydantic-typed parameters."""
    model_params = _model_params(func)

    @wraps(func)
    def wrapper(*args, **kwargs):
        if model_params:
            payload = _request_payload()
            if not isinstance(payload, dict):
                raise ValidationError(
                    "Request body must be a JSON object",
                    {"content_type": request.content_type}
                )

            for name, model in model_params.items():
                try:
                    kwargs[name] = model.model_validate(payload)
                except PydanticValidationError as e:
                    raise ValidationError(
                        "Invalid request data",
                        {"errors": _error_list(e)}
                    )

        return func(*args, **kwargs)

    return wrapper
