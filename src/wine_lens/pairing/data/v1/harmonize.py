"""Reference dataset "harmonize" tags mapped to food categories (v1)."""

HARMONIZE = [
    {"tag": "beef", "food": "beef"},
    {"tag": "veal", "food": "beef"},
    {"tag": "game meat", "food": "beef"},
    {"tag": "pork", "food": "pork"},
    {"tag": "cured meat", "food": "pork"},
    {"tag": "cold cuts", "food": "pork"},
    {"tag": "barbecue", "food": "pork"},
    {"tag": "chicken", "food": "chicken"},
    {"tag": "poultry", "food": "chicken"},
    {"tag": "lamb", "food": "lamb"},
    {"tag": "pasta", "food": "pasta"},
    {"tag": "risotto", "food": "pasta"},
    {"tag": "tomato dishes", "food": "pasta"},
    {"tag": "fish", "food": "fish"},
    {"tag": "rich fish", "food": "fish"},
    {"tag": "lean fish", "food": "fish"},
    {"tag": "codfish", "food": "fish"},
    {"tag": "seafood", "food": "seafood"},
    {"tag": "shellfish", "food": "seafood"},
    {"tag": "vegetarian", "food": "vegetarian"},
    {"tag": "salad", "food": "vegetarian"},
    {"tag": "mushrooms", "food": "vegetarian"},
    {"tag": "maturated cheese", "food": "cheese"},
    {"tag": "soft cheese", "food": "cheese"},
    {"tag": "blue cheese", "food": "cheese"},
    {"tag": "hard cheese", "food": "cheese"},
    {"tag": "goat cheese", "food": "cheese"},
    {"tag": "cheese", "food": "cheese"},
    {"tag": "sweet dessert", "food": "dessert"},
    {"tag": "fruit dessert", "food": "dessert"},
    {"tag": "cake", "food": "dessert"},
    {"tag": "chocolate", "food": "dessert"},
    {"tag": "fruit", "food": "dessert"},
    {"tag": "pizza", "food": "pizza"},
    {"tag": "grilled", "food": "pizza"},
]
