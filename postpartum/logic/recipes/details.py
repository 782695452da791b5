"""Recipe details for a dish of the plan."""
import logging

from postpartum.api.api_ai import GenerationRequest, RECIPE_DETAIL
from postpartum.api.errors import GenerationFailure, MissingCredential, MalformedResponse
from postpartum.domain.RecipeDetails import RecipeDetails
from postpartum.logic.program.seed import seed
from postpartum.utilities.constants import RECIPE_SYSTEM_PROMPT, RECIPE_USER_PROMPT, RECIPE_JSON_FORMAT

logger = logging.getLogger(__name__)


def build_recipe_request(dish_name: str) -> GenerationRequest:
    # A dish cooks the same way whichever day it appears on, so the name alone seeds it
    return GenerationRequest(
        kind=RECIPE_DETAIL,
        system_instruction=RECIPE_SYSTEM_PROMPT,
        user_instruction=RECIPE_USER_PROMPT.format(dish=dish_name) + RECIPE_JSON_FORMAT,
        seed=seed(dish_name),
    )


async def fetch_recipe_details(generator, dish_name: str) -> RecipeDetails:
    """Recipe for `dish_name`; a placeholder when the call or parse fails.

    A missing API key is not degraded: it propagates like on every other path.
    """
    try:
        data = await generator.generate(build_recipe_request(dish_name))
        if not isinstance(data, dict):
            raise MalformedResponse("Recipe reply is not a JSON object")
        return RecipeDetails.from_dict(data)
    except MissingCredential:
        raise
    except GenerationFailure:
        logger.exception("Recipe generation failed for %r", dish_name)
        return RecipeDetails.unavailable()


__all__ = ['fetch_recipe_details', 'build_recipe_request']
