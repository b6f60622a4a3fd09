from __future__ import annotations

import logging

from cookbook.app.domain.models import RecipeDraft, RecipeStatus
from cookbook.app.infra.db.base import RecipeRepository

logger = logging.getLogger(__name__)

SEED_RECIPES: list[RecipeDraft] = [
    RecipeDraft(
        title="Slow-Simmered Sunday Sauce",
        description=(
            "Rich tomato sauce loaded with tender meatballs and Italian sausage. "
            "Perfect ladled over pasta for big family dinners."
        ),
        cook_time="2 hrs",
        servings="6-8",
        image_url="https://images.unsplash.com/photo-1543353071-10c8ba85a904?auto=format&fit=crop&w=1200&q=80",
        ingredients=[
            "2 tbsp olive oil",
            "1 yellow onion, diced",
            "3 cloves garlic, minced",
            "1 lb Italian sausage",
            "1 lb ground beef",
            "2 cans (28 oz) crushed tomatoes",
            "1 cup beef broth",
            "2 tbsp tomato paste",
            "1 tsp dried oregano",
            "1/2 tsp red pepper flakes",
            "Salt and black pepper to taste",
            "Fresh basil for serving",
        ],
        instructions=[
            "Warm olive oil over medium heat and sauté onion until translucent.",
            "Add garlic, sausage, and ground beef; cook until browned.",
            "Stir in tomatoes, broth, tomato paste, and seasonings.",
            "Simmer uncovered for 90 minutes, stirring occasionally.",
            "Season to taste and finish with fresh basil.",
        ],
    ),
    RecipeDraft(
        title="Skillet Herb Roast Chicken",
        description="One-pan roasted chicken with golden potatoes, carrots, and a garlicky herb butter drizzle.",
        cook_time="1 hr 15 mins",
        servings="4",
        image_url="https://images.unsplash.com/photo-1512621776951-a57141f2eefd?auto=format&fit=crop&w=1200&q=80",
        ingredients=[
            "1 whole chicken (3 1/2 - 4 lbs)",
            "4 tbsp butter, softened",
            "4 cloves garlic, minced",
            "1 lemon, zested",
            "2 tsp fresh rosemary, chopped",
            "1 tsp fresh thyme leaves",
            "1 lb baby potatoes, halved",
            "3 carrots, cut into chunks",
            "1 tbsp olive oil",
            "Salt and freshly cracked pepper",
        ],
        instructions=[
            "Preheat oven to 425 F (220 C). Pat chicken dry.",
            "Mix butter, garlic, lemon zest, rosemary, thyme, salt, and pepper.",
            "Rub herb butter under the skin and over the chicken.",
            "Toss potatoes and carrots with olive oil, salt, and pepper in a skillet.",
            "Place chicken on vegetables and roast 65 minutes, basting halfway.",
            "Rest 10 minutes before carving and serving.",
        ],
    ),
    RecipeDraft(
        title="Fresh Garden Pesto Pasta",
        description="Bright basil pesto tossed with al dente pasta, toasted pine nuts, and juicy cherry tomatoes.",
        cook_time="30 mins",
        servings="4",
        image_url="https://images.unsplash.com/photo-1525755662778-989d0524087e?auto=format&fit=crop&w=1200&q=80",
        ingredients=[
            "12 oz linguine or spaghetti",
            "2 cups fresh basil leaves",
            "1/3 cup toasted pine nuts",
            "2 cloves garlic",
            "1/2 cup freshly grated Parmesan",
            "1/2 cup extra-virgin olive oil",
            "1 cup cherry tomatoes, halved",
            "Salt and pepper",
            "Squeeze of lemon juice",
        ],
        instructions=[
            "Cook pasta in salted water until al dente; reserve 1/2 cup pasta water.",
            "Blend basil, pine nuts, garlic, and Parmesan while drizzling in olive oil.",
            "Season pesto with salt, pepper, and lemon juice.",
            "Toss cooked pasta with pesto, loosening with reserved water as needed.",
            "Fold in cherry tomatoes and serve immediately.",
        ],
    ),
]


def seed_sample_content(recipes: RecipeRepository) -> int:
    """Insert the starter recipes when the table is empty. Returns the number inserted."""
    if recipes.count_recipes() > 0:
        return 0
    for draft in SEED_RECIPES:
        recipes.create_recipe(draft, RecipeStatus.APPROVED)
    logger.info("Seeded recipes table with %d starter recipes", len(SEED_RECIPES))
    return len(SEED_RECIPES)
