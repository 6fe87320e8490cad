"""Built-in catalog of kid-friendly snacks."""

from snack_suggestions.domain.snacks import SnackCategory, SnackSuggestion

_PEXELS = "https://images.pexels.com/photos"
_PEXELS_PARAMS = "auto=compress&cs=tinysrgb&w=400"

SNACK_CATALOG: tuple[SnackSuggestion, ...] = (
    SnackSuggestion(
        id="1",
        name="Banana Oat Energy Balls",
        calories=180,
        protein=6,
        carbs=28,
        fat=7,
        image_url=f"{_PEXELS}/1092730/pexels-photo-1092730.jpeg?{_PEXELS_PARAMS}",
        recipe=(
            "1. Mash 1 ripe banana\n"
            "2. Mix with 1/2 cup rolled oats\n"
            "3. Add 2 tbsp peanut butter\n"
            "4. Form into balls and chill for 30 minutes"
        ),
        category=SnackCategory.BOTH,
    ),
    SnackSuggestion(
        id="2",
        name="Greek Yogurt with Berries",
        calories=150,
        protein=15,
        carbs=20,
        fat=3,
        image_url=f"{_PEXELS}/1099680/pexels-photo-1099680.jpeg?{_PEXELS_PARAMS}",
        recipe=(
            "1. Take 1 cup Greek yogurt\n"
            "2. Add 1/2 cup mixed berries\n"
            "3. Drizzle with 1 tsp honey\n"
            "4. Sprinkle with granola if desired"
        ),
        category=SnackCategory.BOTH,
    ),
    SnackSuggestion(
        id="3",
        name="Apple Slices with Almond Butter",
        calories=200,
        protein=8,
        carbs=25,
        fat=12,
        image_url=f"{_PEXELS}/1092730/pexels-photo-1092730.jpeg?{_PEXELS_PARAMS}",
        recipe=(
            "1. Slice 1 medium apple\n"
            "2. Serve with 2 tbsp almond butter\n"
            "3. Sprinkle with cinnamon\n"
            "4. Optional: add a few raisins"
        ),
        category=SnackCategory.BOTH,
    ),
    SnackSuggestion(
        id="4",
        name="Whole Grain Crackers with Cheese",
        calories=160,
        protein=8,
        carbs=18,
        fat=7,
        image_url=f"{_PEXELS}/1640777/pexels-photo-1640777.jpeg?{_PEXELS_PARAMS}",
        recipe=(
            "1. Take 8-10 whole grain crackers\n"
            "2. Add 1 oz cheese slices\n"
            "3. Optional: add cucumber slices\n"
            "4. Serve immediately"
        ),
        category=SnackCategory.BOTH,
    ),
    SnackSuggestion(
        id="5",
        name="Smoothie Bowl",
        calories=220,
        protein=12,
        carbs=35,
        fat=6,
        image_url=f"{_PEXELS}/1092730/pexels-photo-1092730.jpeg?{_PEXELS_PARAMS}",
        recipe=(
            "1. Blend 1 banana, 1/2 cup berries, 1/2 cup milk\n"
            "2. Pour into bowl\n"
            "3. Top with granola and nuts\n"
            "4. Add fresh fruit slices"
        ),
        category=SnackCategory.MORNING,
    ),
    SnackSuggestion(
        id="6",
        name="Hummus with Veggie Sticks",
        calories=140,
        protein=6,
        carbs=16,
        fat=7,
        image_url=f"{_PEXELS}/1640777/pexels-photo-1640777.jpeg?{_PEXELS_PARAMS}",
        recipe=(
            "1. Cut carrots, cucumbers, and bell peppers\n"
            "2. Serve with 1/4 cup hummus\n"
            "3. Optional: add cherry tomatoes\n"
            "4. Sprinkle with paprika"
        ),
        category=SnackCategory.AFTERNOON,
    ),
    SnackSuggestion(
        id="7",
        name="Mini Whole Wheat Muffin",
        calories=190,
        protein=5,
        carbs=32,
        fat=6,
        image_url=f"{_PEXELS}/1092730/pexels-photo-1092730.jpeg?{_PEXELS_PARAMS}",
        recipe=(
            "1. Mix 1 cup whole wheat flour, 1/2 cup oats\n"
            "2. Add mashed banana and milk\n"
            "3. Bake in mini muffin tins\n"
            "4. Cool before serving"
        ),
        category=SnackCategory.BOTH,
    ),
    SnackSuggestion(
        id="8",
        name="Trail Mix",
        calories=170,
        protein=6,
        carbs=20,
        fat=9,
        image_url=f"{_PEXELS}/1640777/pexels-photo-1640777.jpeg?{_PEXELS_PARAMS}",
        recipe=(
            "1. Mix 1/4 cup nuts (almonds, walnuts)\n"
            "2. Add 2 tbsp dried fruits\n"
            "3. Include a few dark chocolate chips\n"
            "4. Store in airtight container"
        ),
        category=SnackCategory.AFTERNOON,
    ),
)
