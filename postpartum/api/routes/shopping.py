from fastapi import APIRouter, Depends, HTTPException, Query

from postpartum.api.dependencies import get_session
from postpartum.domain.ShoppingList import ShoppingList
from postpartum.logic.session import ProgramSession
from postpartum.utilities.validators import ShoppingListRequest

router = APIRouter(prefix="/api/shopping-list", tags=["shopping"])


def _list_payload(shopping_list: ShoppingList):
    data = shopping_list.to_dict()
    data["remaining"] = shopping_list.remaining()
    data["grouped"] = {
        category: [{"index": index, **item.to_dict()} for index, item in entries]
        for category, entries in shopping_list.grouped().items()
    }
    return data


@router.get("")
def current_list(session: ProgramSession = Depends(get_session)):
    shopping_list = session.shopping_list
    return {"shopping_list": _list_payload(shopping_list) if shopping_list else None}


@router.post("")
async def generate_list(payload: ShoppingListRequest, session: ProgramSession = Depends(get_session)):
    shopping_list = await session.generate_shopping_list(payload.days)
    return {"shopping_list": _list_payload(shopping_list)}


@router.post("/items/{index}/toggle")
def toggle(index: int, session: ProgramSession = Depends(get_session)):
    try:
        shopping_list = session.toggle_shopping_item(index)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"shopping_list": _list_payload(shopping_list)}


@router.delete("")
def clear(confirm: bool = Query(default=False), session: ProgramSession = Depends(get_session)):
    if not confirm:
        raise HTTPException(status_code=400, detail="Clearing the shopping list needs confirm=true")
    session.clear_shopping_list()
    return {"shopping_list": None}
