"""Grape, region and style keywords with per-food pairing scores (v1)."""

KEYWORDS = [
    # Red grapes
    {
        "keyword": "cabernet sauvignon",
        "wine_type": "Red",
        "description": "Full-bodied red with firm tannins that cut through rich, fatty meats",
        "scores": {"beef": 10, "lamb": 9, "pork": 6, "cheese": 7, "pasta": 6, "chicken": 4, "vegetarian": 3, "pizza": 6},
    },
    {
        "keyword": "cabernet",
        "wine_type": "Red",
        "description": "Full-bodied red with firm tannins that cut through rich, fatty meats",
        "scores": {"beef": 10, "lamb": 9, "pork": 6, "cheese": 7, "pasta": 6, "chicken": 4},
    },
    {
        "keyword": "cabernet franc",
        "wine_type": "Red",
        "description": "Medium-bodied red with herbal, peppery lift",
        "scores": {"lamb": 8, "pork": 8, "beef": 7, "chicken": 6, "vegetarian": 6, "cheese": 7, "pizza": 6},
    },
    {
        "keyword": "merlot",
        "wine_type": "Red",
        "description": "Medium-bodied, smooth red that pairs broadly with meats and pasta",
        "scores": {"beef": 8, "lamb": 7, "pork": 7, "chicken": 6, "pasta": 7, "cheese": 6, "pizza": 7, "vegetarian": 5},
    },
    {
        "keyword": "pinot noir",
        "wine_type": "Red",
        "description": "Light, elegant red with earthy notes; extremely versatile with lighter dishes",
        "scores": {
            "chicken": 9,
            "pork": 8,
            "lamb": 7,
            "fish": 6,
            "pasta": 7,
            "beef": 5,
            "cheese": 7,
            "sushi": 5,
            "vegetarian": 7,
            "pizza": 6,
        },
    },
    {
        "keyword": "malbec",
        "wine_type": "Red",
        "description": "Bold, juicy red with dark fruit, a classic steak wine",
        "scores": {"beef": 10, "lamb": 8, "pork": 7, "cheese": 6, "pasta": 6, "pizza": 6},
    },
    {
        "keyword": "syrah",
        "wine_type": "Red",
        "description": "Spicy, peppery red that stands up to bold, gamey flavors",
        "scores": {"beef": 8, "lamb": 9, "pork": 7, "cheese": 6, "pasta": 5, "pizza": 5},
    },
    {
        "keyword": "shiraz",
        "wine_type": "Red",
        "description": "Bold, fruit-forward red with spice; great with grilled meats",
        "scores": {"beef": 8, "lamb": 9, "pork": 7, "cheese": 6, "pasta": 5, "pizza": 6},
    },
    {
        "keyword": "petite sirah",
        "wine_type": "Red",
        "description": "Inky, tannic red built for smoked and braised meats",
        "scores": {"beef": 9, "lamb": 8, "pork": 7, "cheese": 6},
    },
    {
        "keyword": "zinfandel",
        "wine_type": "Red",
        "description": "Jammy, bold red with high fruit; loves BBQ and spiced dishes",
        "scores": {"beef": 7, "pork": 8, "lamb": 6, "pizza": 8, "pasta": 6, "cheese": 5},
    },
    {
        "keyword": "primitivo",
        "wine_type": "Red",
        "description": "Rich, ripe red similar to Zinfandel that pairs with hearty, grilled fare",
        "scores": {"beef": 7, "pork": 8, "lamb": 6, "pizza": 8, "pasta": 7},
    },
    {
        "keyword": "tempranillo",
        "wine_type": "Red",
        "description": "Medium-bodied Spanish red with savory leather and cherry notes",
        "scores": {"beef": 8, "lamb": 8, "pork": 7, "cheese": 7, "pasta": 6, "pizza": 5},
    },
    {
        "keyword": "sangiovese",
        "wine_type": "Red",
        "description": "Italian red with high acidity, born for tomato-based dishes",
        "scores": {"pasta": 10, "pizza": 9, "beef": 6, "lamb": 6, "pork": 6, "chicken": 6, "cheese": 7, "vegetarian": 6},
    },
    {
        "keyword": "nebbiolo",
        "wine_type": "Red",
        "description": "Powerful, tannic Italian red with roses and tar that pairs with rich dishes",
        "scores": {"beef": 9, "lamb": 8, "pasta": 8, "cheese": 8, "pork": 6},
    },
    {
        "keyword": "grenache",
        "wine_type": "Red",
        "description": "Fruity, spicy red that works with a wide range of Mediterranean dishes",
        "scores": {"lamb": 8, "beef": 7, "pork": 7, "chicken": 6, "pasta": 6, "cheese": 6, "pizza": 6, "vegetarian": 6},
    },
    {
        "keyword": "garnacha",
        "wine_type": "Red",
        "description": "Spanish Grenache, ripe and spicy with Mediterranean flair",
        "scores": {"lamb": 8, "beef": 7, "pork": 7, "chicken": 6, "pasta": 6, "cheese": 6, "pizza": 6},
    },
    {
        "keyword": "barbera",
        "wine_type": "Red",
        "description": "High-acid Italian red, excellent with tomato sauces and cured meats",
        "scores": {"pasta": 9, "pizza": 8, "pork": 7, "beef": 6, "chicken": 6, "cheese": 6},
    },
    {
        "keyword": "gamay",
        "wine_type": "Red",
        "description": "Light, fruity red; serve slightly chilled with lighter dishes",
        "scores": {"chicken": 8, "pork": 7, "pasta": 6, "pizza": 6, "cheese": 6, "fish": 5, "vegetarian": 6},
    },
    {
        "keyword": "carmenere",
        "wine_type": "Red",
        "description": "Chilean red with green pepper and plum, good with grilled meats",
        "scores": {"beef": 8, "lamb": 7, "pork": 7, "vegetarian": 5, "pizza": 6},
    },
    {
        "keyword": "pinotage",
        "wine_type": "Red",
        "description": "Smoky South African red made for the braai",
        "scores": {"beef": 8, "pork": 7, "lamb": 7, "pizza": 5},
    },
    # White grapes
    {
        "keyword": "chardonnay",
        "wine_type": "White",
        "description": "Rich white with buttery notes, ideal with poultry and creamy sauces",
        "scores": {"chicken": 9, "fish": 8, "seafood": 7, "pork": 6, "pasta": 6, "vegetarian": 6, "cheese": 6},
    },
    {
        "keyword": "sauvignon blanc",
        "wine_type": "White",
        "description": "Crisp, zesty white with herbal notes, perfect with seafood and salads",
        "scores": {"fish": 9, "seafood": 9, "chicken": 7, "vegetarian": 8, "sushi": 7, "cheese": 7, "pasta": 5},
    },
    {
        "keyword": "riesling",
        "wine_type": "White",
        "description": "Aromatic white with bright acidity, especially good with Asian cuisine",
        "scores": {"sushi": 9, "seafood": 8, "fish": 8, "chicken": 7, "pork": 7, "vegetarian": 7, "dessert": 6, "cheese": 6},
    },
    {
        "keyword": "pinot grigio",
        "wine_type": "White",
        "description": "Light, refreshing white; an easy-drinking choice with lighter fare",
        "scores": {"fish": 8, "seafood": 7, "chicken": 7, "pasta": 6, "vegetarian": 7, "sushi": 6, "pizza": 5},
    },
    {
        "keyword": "pinot gris",
        "wine_type": "White",
        "description": "Fuller-bodied style of Pinot Grigio with stone fruit notes",
        "scores": {"fish": 8, "seafood": 7, "chicken": 7, "pasta": 6, "vegetarian": 7, "pork": 6},
    },
    {
        "keyword": "viognier",
        "wine_type": "White",
        "description": "Aromatic, full white with peach and floral notes",
        "scores": {"chicken": 8, "fish": 7, "seafood": 6, "vegetarian": 6, "pork": 6, "cheese": 5},
    },
    {
        "keyword": "gewurztraminer",
        "wine_type": "White",
        "description": "Intensely aromatic white with lychee and spice, great with Asian food",
        "scores": {"sushi": 8, "seafood": 7, "pork": 7, "chicken": 6, "cheese": 7, "dessert": 6, "vegetarian": 6},
    },
    {
        "keyword": "gruner veltliner",
        "wine_type": "White",
        "description": "Crisp Austrian white with white pepper, excellent with vegetables",
        "scores": {"vegetarian": 8, "fish": 7, "chicken": 7, "sushi": 7, "seafood": 7, "pork": 6},
    },
    {
        "keyword": "albarino",
        "wine_type": "White",
        "description": "Bright Spanish white with citrus and salinity, made for shellfish",
        "scores": {"seafood": 9, "fish": 9, "sushi": 7, "chicken": 6, "vegetarian": 6},
    },
    {
        "keyword": "muscadet",
        "wine_type": "White",
        "description": "Bone-dry, mineral French white; the classic oyster wine",
        "scores": {"seafood": 9, "fish": 8, "sushi": 6, "vegetarian": 5},
    },
    {
        "keyword": "chenin blanc",
        "wine_type": "White",
        "description": "Versatile white ranging from dry to sweet that pairs broadly",
        "scores": {"chicken": 7, "fish": 7, "pork": 7, "vegetarian": 7, "seafood": 6, "cheese": 6, "dessert": 5},
    },
    {
        "keyword": "semillon",
        "wine_type": "White",
        "description": "Waxy, full white with honey notes",
        "scores": {"fish": 7, "chicken": 7, "seafood": 6, "cheese": 6, "dessert": 5},
    },
    {
        "keyword": "vermentino",
        "wine_type": "White",
        "description": "Coastal Italian white, herbal and saline",
        "scores": {"seafood": 8, "fish": 8, "vegetarian": 7, "pasta": 6, "sushi": 6},
    },
    {
        "keyword": "verdejo",
        "wine_type": "White",
        "description": "Zesty Spanish white with fennel and citrus",
        "scores": {"seafood": 8, "fish": 7, "vegetarian": 7, "chicken": 6, "sushi": 6},
    },
    {
        "keyword": "torrontes",
        "wine_type": "White",
        "description": "Floral Argentine white that handles spice",
        "scores": {"sushi": 7, "seafood": 7, "chicken": 6, "vegetarian": 6},
    },
    # Rose
    {
        "keyword": "rosé",
        "wine_type": "Rosé",
        "description": "Dry rosé is extremely versatile and a great crowd-pleaser",
        "scores": {
            "chicken": 7,
            "fish": 7,
            "seafood": 7,
            "vegetarian": 7,
            "pasta": 6,
            "pizza": 6,
            "sushi": 6,
            "pork": 6,
            "cheese": 5,
        },
    },
    # Sparkling
    {
        "keyword": "champagne",
        "wine_type": None,
        "description": "Sparkling wine with high acidity and bubbles that cleanse the palate",
        "scores": {"seafood": 9, "sushi": 8, "fish": 8, "chicken": 7, "cheese": 7, "dessert": 6, "vegetarian": 7, "pasta": 5},
    },
    {
        "keyword": "prosecco",
        "wine_type": "White",
        "description": "Light, fruity sparkling for an aperitif or light food pairing",
        "scores": {"seafood": 7, "fish": 7, "sushi": 7, "chicken": 6, "vegetarian": 6, "pasta": 5, "pizza": 5, "dessert": 5},
    },
    {
        "keyword": "cava",
        "wine_type": "White",
        "description": "Spanish sparkling with citrus and toast; great value bubbly",
        "scores": {"seafood": 8, "fish": 7, "sushi": 7, "chicken": 6, "cheese": 6},
    },
    {
        "keyword": "cremant",
        "wine_type": None,
        "description": "Traditional-method French sparkling from outside Champagne",
        "scores": {"seafood": 8, "fish": 7, "sushi": 7, "chicken": 6, "cheese": 6, "vegetarian": 6},
    },
    {
        "keyword": "sparkling",
        "wine_type": None,
        "description": "Bubbles and acidity make sparkling wine a versatile food partner",
        "scores": {"seafood": 8, "fish": 7, "sushi": 7, "chicken": 6, "vegetarian": 6, "cheese": 6},
    },
    {
        "keyword": "lambrusco",
        "wine_type": "Red",
        "description": "Fizzy, fruity Italian red for cured meats and pizza",
        "scores": {"pizza": 8, "pork": 8, "pasta": 7, "cheese": 6},
    },
    # Dessert and fortified
    {
        "keyword": "moscato",
        "wine_type": "White",
        "description": "Sweet, lightly sparkling wine and a natural dessert companion",
        "scores": {"dessert": 9, "cheese": 6, "sushi": 4},
    },
    {
        "keyword": "port",
        "wine_type": "Red",
        "description": "Rich, sweet fortified wine, classic with chocolate and blue cheese",
        "scores": {"dessert": 9, "cheese": 9, "beef": 4},
    },
    {
        "keyword": "porto",
        "wine_type": "Red",
        "description": "Rich, sweet fortified wine, classic with chocolate and blue cheese",
        "scores": {"dessert": 9, "cheese": 9, "beef": 4},
    },
    {
        "keyword": "sauternes",
        "wine_type": "White",
        "description": "Luscious sweet French wine; the ultimate dessert pairing",
        "scores": {"dessert": 10, "cheese": 8, "fish": 4},
    },
    {
        "keyword": "tokaji",
        "wine_type": "White",
        "description": "Honeyed Hungarian sweet wine with racy acidity",
        "scores": {"dessert": 9, "cheese": 8},
    },
    {
        "keyword": "ice wine",
        "wine_type": None,
        "description": "Intensely sweet wine from frozen grapes",
        "scores": {"dessert": 9, "cheese": 7},
    },
    {
        "keyword": "icewine",
        "wine_type": None,
        "description": "Intensely sweet wine from frozen grapes",
        "scores": {"dessert": 9, "cheese": 7},
    },
    # Regions and blends
    {
        "keyword": "bordeaux",
        "wine_type": None,
        "description": "Classic Bordeaux blend, structured, age-worthy and built for red meat",
        "scores": {"beef": 9, "lamb": 9, "cheese": 7, "pork": 6, "pasta": 5},
    },
    {
        "keyword": "burgundy",
        "wine_type": None,
        "description": "Elegant Burgundy, Pinot Noir or Chardonnay depending on color",
        "scores": {"chicken": 8, "beef": 7, "lamb": 7, "pork": 7, "fish": 6, "cheese": 7, "pasta": 6},
    },
    {
        "keyword": "bourgogne",
        "wine_type": None,
        "description": "Elegant Burgundy, Pinot Noir or Chardonnay depending on color",
        "scores": {"chicken": 8, "beef": 7, "lamb": 7, "pork": 7, "fish": 6, "cheese": 7},
    },
    {
        "keyword": "chianti",
        "wine_type": "Red",
        "description": "Tuscan Sangiovese, the definitive Italian food wine",
        "scores": {"pasta": 10, "pizza": 9, "beef": 6, "lamb": 6, "cheese": 7, "chicken": 5},
    },
    {
        "keyword": "brunello",
        "wine_type": "Red",
        "description": "Age-worthy Montalcino Sangiovese with savory depth",
        "scores": {"beef": 9, "lamb": 8, "pasta": 8, "cheese": 8, "pork": 6},
    },
    {
        "keyword": "barolo",
        "wine_type": "Red",
        "description": "King of Italian wines: powerful Nebbiolo with truffle and tar",
        "scores": {"beef": 9, "lamb": 8, "pasta": 8, "cheese": 8, "pork": 5},
    },
    {
        "keyword": "barbaresco",
        "wine_type": "Red",
        "description": "Elegant Nebbiolo, slightly lighter than Barolo and equally food-friendly",
        "scores": {"beef": 8, "lamb": 8, "pasta": 8, "cheese": 7, "pork": 6},
    },
    {
        "keyword": "rioja",
        "wine_type": "Red",
        "description": "Spanish Tempranillo, oaky and savory, built for grilled meats",
        "scores": {"beef": 8, "lamb": 8, "pork": 7, "cheese": 7, "chicken": 6, "pasta": 5},
    },
    {
        "keyword": "ribera del duero",
        "wine_type": "Red",
        "description": "Muscular Spanish Tempranillo for roasts",
        "scores": {"beef": 9, "lamb": 9, "pork": 7, "cheese": 7},
    },
    {
        "keyword": "cotes du rhone",
        "wine_type": None,
        "description": "Southern Rhône blend, fruity, spicy and great value",
        "scores": {"lamb": 8, "beef": 7, "pork": 7, "chicken": 6, "cheese": 6, "pasta": 5, "pizza": 5},
    },
    {
        "keyword": "chateauneuf",
        "wine_type": "Red",
        "description": "Complex Rhône blend, rich and powerful with herbal garrigue notes",
        "scores": {"lamb": 9, "beef": 8, "pork": 7, "cheese": 7},
    },
    {
        "keyword": "sancerre",
        "wine_type": "White",
        "description": "Loire Sauvignon Blanc, crisp and mineral with goat cheese affinity",
        "scores": {"fish": 9, "seafood": 8, "cheese": 8, "chicken": 7, "vegetarian": 7, "sushi": 6},
    },
    {
        "keyword": "chablis",
        "wine_type": "White",
        "description": "Unoaked Burgundy Chardonnay, steely and mineral, built for shellfish",
        "scores": {"fish": 9, "seafood": 9, "sushi": 7, "chicken": 6, "vegetarian": 6},
    },
    {
        "keyword": "pouilly",
        "wine_type": "White",
        "description": "Loire white, crisp and elegant, great with lighter fare",
        "scores": {"fish": 8, "seafood": 8, "chicken": 6, "vegetarian": 6, "cheese": 6},
    },
    {
        "keyword": "valpolicella",
        "wine_type": "Red",
        "description": "Light Italian red with fresh cherry fruit for everyday Italian food",
        "scores": {"pasta": 8, "pizza": 7, "beef": 6, "pork": 6, "chicken": 6},
    },
    {
        "keyword": "amarone",
        "wine_type": "Red",
        "description": "Rich, dried-grape Italian red, intense and powerful for bold dishes",
        "scores": {"beef": 9, "lamb": 8, "cheese": 8, "pasta": 6},
    },
    {
        "keyword": "beaujolais",
        "wine_type": "Red",
        "description": "Light, fruity Gamay; serve slightly chilled with lighter dishes",
        "scores": {"chicken": 8, "pork": 7, "pasta": 6, "pizza": 6, "cheese": 6, "fish": 5, "vegetarian": 6},
    },
    {
        "keyword": "montepulciano",
        "wine_type": "Red",
        "description": "Full-bodied Italian red with dark fruit and soft tannins, great with red sauce",
        "scores": {"pasta": 8, "pizza": 8, "beef": 7, "lamb": 6, "pork": 6},
    },
]
