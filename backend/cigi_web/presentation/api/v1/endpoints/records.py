"""Record-list editing endpoints.

Each call carries the current list and one operation; the response is the
list the editor would hand back to its owner.
"""

from fastapi import APIRouter, HTTPException, status

from cigi_web.application.components.record_list import RecordListEditor
from cigi_web.application.components.record_shapes import MORE_ABOUT, get_shape, more_about_presets
from cigi_web.application.schemas import RecordListResponse, RecordOperation, RecordOperationRequest
from cigi_web.domain.exceptions import EntityNotFoundError, InvalidFieldValueError, UnknownFieldError

router = APIRouter(prefix="/records", tags=["Records"])


def _require(value, name: str, operation: RecordOperation):
    if value is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"'{name}' is required for {operation.value}",
        )
    return value


def _apply(editor: RecordListEditor, operation: RecordOperation, body: RecordOperationRequest) -> None:
    match operation:
        case RecordOperation.ADD:
            editor.add()
        case RecordOperation.REMOVE:
            editor.remove(_require(body.index, "index", operation))
        case RecordOperation.UPDATE:
            editor.update_field(
                _require(body.index, "index", operation),
                _require(body.field, "field", operation),
                body.value,
            )
        case RecordOperation.ADD_NESTED:
            editor.add_nested(_require(body.index, "index", operation), _require(body.field, "field", operation))
        case RecordOperation.UPDATE_NESTED:
            editor.update_nested(
                _require(body.index, "index", operation),
                _require(body.field, "field", operation),
                _require(body.item_index, "item_index", operation),
                str(body.value or ""),
            )
        case RecordOperation.REMOVE_NESTED:
            editor.remove_nested(
                _require(body.index, "index", operation),
                _require(body.field, "field", operation),
                _require(body.item_index, "item_index", operation),
            )
        case RecordOperation.REORDER:
            editor.drag.drag_start(_require(body.from_index, "from_index", operation))
            editor.drag.drop(editor.value, _require(body.to_index, "to_index", operation))
        case RecordOperation.ADD_PRESET:
            if editor.shape is not MORE_ABOUT:
                raise HTTPException(
                    status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                    detail=f"Shape '{editor.shape.name}' has no presets",
                )
            title = _require(body.title, "title", operation).lower()
            preset = next((p for p in more_about_presets() if p.title.lower() == title), None)
            if preset is None:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No preset titled '{body.title}'")
            editor.add_preset(preset)


@router.post("/{shape_name}/{operation}", response_model=RecordListResponse)
async def edit_records(
    shape_name: str,
    operation: RecordOperation,
    body: RecordOperationRequest,
) -> RecordListResponse:
    """Apply one editing operation to a record list of the named shape."""
    try:
        shape = get_shape(shape_name)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    try:
        before = [shape.from_dict(item) for item in body.items]
    except TypeError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    editor = RecordListEditor(shape, before, max_items=body.max_items)
    try:
        _apply(editor, operation, body)
    except IndexError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except (UnknownFieldError, InvalidFieldValueError) as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    return RecordListResponse(
        shape=shape.name,
        items=[shape.to_dict(record) for record in editor.value],
        counter=editor.counter,
        can_add=editor.can_add,
        changed=editor.value != before,
    )
