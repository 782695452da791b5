import unittest
from postpartum.api.api_ai import RECIPE_DETAIL
from postpartum.api.errors import MissingCredential
from postpartum.domain.RecipeDetails import RecipeDetails
from postpartum.logic.program.seed import seed
from postpartum.logic.recipes.details import build_recipe_request, fetch_recipe_details
from postpartum.tests.fakes import FakeGenerator


class _NoKeyGenerator:
    async def generate(self, request):
        raise MissingCredential("no key")


class _ListGenerator:
    async def generate(self, request):
        return ["not", "an", "object"]


class TestRecipeDetails(unittest.IsolatedAsyncioTestCase):

    async def test_details_parsed(self):
        details = await fetch_recipe_details(FakeGenerator(), "Millet porridge")
        self.assertEqual(details.ingredients, ("millet 50g", "brown sugar 10g"))
        self.assertEqual(details.steps, ("rinse", "simmer 30 minutes"))
        self.assertEqual(details.nutrition_highlights, "easy to digest")

    async def test_request_is_seeded_by_dish(self):
        request = build_recipe_request("Millet porridge")
        self.assertEqual(request.kind, RECIPE_DETAIL)
        self.assertEqual(request.seed, seed("Millet porridge"))
        self.assertIn("Millet porridge", request.user_instruction)

    async def test_transport_failure_gives_placeholder(self):
        details = await fetch_recipe_details(FakeGenerator(fail_kinds={RECIPE_DETAIL}), "Fish soup")
        self.assertEqual(details, RecipeDetails.unavailable())
        self.assertEqual(details.ingredients, ("Failed to load",))

    async def test_non_object_reply_gives_placeholder(self):
        self.assertEqual(await fetch_recipe_details(_ListGenerator(), "Fish soup"), RecipeDetails.unavailable())

    async def test_missing_credential_propagates(self):
        with self.assertRaises(MissingCredential):
            await fetch_recipe_details(_NoKeyGenerator(), "Fish soup")
