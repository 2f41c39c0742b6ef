"""Global-variable value editor endpoint."""

from fastapi import APIRouter, Query

from cigi_web.application.forms.global_variable import TYPE_DESCRIPTIONS, value_input, value_problem
from cigi_web.application.schemas import ValueInputResponse
from cigi_web.domain.entities import VariableType

router = APIRouter(prefix="/global-variables", tags=["Global Variables"])


@router.get("/value-input", response_model=ValueInputResponse)
async def get_value_input(
    type: VariableType = Query(...),
    value: str | None = Query(None),
) -> ValueInputResponse:
    """How the value field renders for ``type``; ``problem`` checks ``value`` when given."""
    widget = value_input(type)
    return ValueInputResponse(
        type=type.value,
        widget=widget.widget,
        input_type=widget.input_type,
        placeholder=widget.placeholder,
        rows=widget.rows,
        hint=widget.hint,
        description=TYPE_DESCRIPTIONS[type],
        value_required=type is not VariableType.BOOLEAN,
        problem=value_problem(type, value) if value is not None else None,
    )
