"""Shopping list builder.

Turns the meal names of a period into one consolidated checklist via the
content generator, and provides the copy-on-write edits on that checklist:
build(meal_names, days_covered), toggle_item(shopping_list, index), clear_list().
"""
import logging
from datetime import datetime
from typing import Any, Callable, List, Optional, Sequence

from postpartum.api.api_ai import GenerationRequest, SHOPPING_LIST
from postpartum.api.errors import GenerationFailure, MalformedResponse
from postpartum.domain.ShoppingList import ShoppingItem, ShoppingList, normalize_category
from postpartum.logic.program.seed import seed
from postpartum.utilities.constants import (
    SHOPPING_CATEGORIES, SHOPPING_SYSTEM_PROMPT, SHOPPING_USER_PROMPT, SHOPPING_JSON_FORMAT
)

logger = logging.getLogger(__name__)


def build_shopping_request(meal_names: Sequence[str], days_covered: int) -> GenerationRequest:
    prompt = SHOPPING_USER_PROMPT.format(
        days=days_covered,
        meal_names=", ".join(meal_names),
        categories=", ".join(SHOPPING_CATEGORIES),
    )
    return GenerationRequest(
        kind=SHOPPING_LIST,
        system_instruction=SHOPPING_SYSTEM_PROMPT,
        user_instruction=prompt + SHOPPING_JSON_FORMAT,
        seed=seed(",".join(meal_names)),
    )


def items_from_response(data: Any) -> List[ShoppingItem]:
    """Every item starts unchecked, whatever the reply (or an earlier list) says."""
    if not isinstance(data, dict):
        raise MalformedResponse("Shopping list reply is not a JSON object")
    entries = data.get("items") or []
    if not isinstance(entries, list):
        raise MalformedResponse("'items' is not a list")
    items = []
    for entry in entries:
        if not isinstance(entry, dict) or not entry.get("name"):
            logger.debug("Skipping shopping entry without a name: %r", entry)
            continue
        items.append(ShoppingItem(
            name=str(entry["name"]).strip(),
            amount=str(entry.get("amount") or "").strip(),
            category=normalize_category(entry.get("category")),
            checked=False,
        ))
    return items


class ShoppingListBuilder:
    def __init__(self, generator, clock: Optional[Callable[[], datetime]] = None):
        self.generator = generator
        self.clock = clock or datetime.now

    async def build(self, meal_names: Sequence[str], days_covered: int) -> ShoppingList:
        """Ask the generator to merge and categorize the ingredients of `meal_names`.

        With no meals there is nothing to buy, so no request is sent.
        Raises GenerationFailure when the call or its parsing fails.
        """
        items: List[ShoppingItem] = []
        if meal_names:
            request = build_shopping_request(meal_names, days_covered)
            try:
                data = await self.generator.generate(request)
                items = items_from_response(data)
            except GenerationFailure:
                logger.exception("Shopping list generation failed for %d meals", len(meal_names))
                raise
        else:
            logger.info("No meals for the %d-day window; shopping list is empty", days_covered)
        return ShoppingList(generated_at=self.clock(), days_covered=days_covered, items=tuple(items))


def toggle_item(shopping_list: ShoppingList, index: int) -> ShoppingList:
    """Copy of the list with exactly one item's `checked` flipped."""
    if not 0 <= index < len(shopping_list.items):
        raise IndexError(f"No shopping item at index {index}")
    items = list(shopping_list.items)
    item = items[index]
    items[index] = ShoppingItem(item.name, item.amount, item.category, not item.checked)
    return shopping_list.with_items(items)


def clear_list() -> None:
    '''Irreversible; asking the user to confirm is the caller's job.'''
    return None


__all__ = ['ShoppingListBuilder', 'build_shopping_request', 'items_from_response', 'toggle_item', 'clear_list']
