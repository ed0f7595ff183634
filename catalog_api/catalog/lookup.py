"""Static lookup data for synthesizing products.

Categories, brands, per-category item names, adjectives and description
templates. Plain module-level constants; nothing here has state.
"""

CATEGORIES: list[str] = [
    "Electronics",
    "Clothing",
    "Home & Garden",
    "Sports & Outdoors",
    "Books",
    "Toys & Games",
    "Food & Beverages",
    "Health & Beauty",
    "Automotive",
    "Office Supplies",
]

BRANDS: list[str] = [
    "TechPro",
    "SmartHome",
    "EcoLife",
    "ActiveGear",
    "ComfortZone",
    "PureNature",
    "UrbanStyle",
    "PowerMax",
    "VitalHealth",
    "CreativeMinds",
    "GreenChoice",
    "ProFit",
    "EliteQuality",
    "SwiftTech",
    "BrightFuture",
]

# Base item names by category
PRODUCT_NAMES: dict[str, list[str]] = {
    "Electronics": [
        "Wireless Mouse", "Bluetooth Speaker", "Smart Watch", "USB Cable", "Power Bank",
        "Earbuds", "Keyboard", "Monitor", "Laptop Stand", "Webcam",
    ],
    "Clothing": [
        "T-Shirt", "Jeans", "Sneakers", "Jacket", "Dress",
        "Hoodie", "Socks", "Cap", "Scarf", "Gloves",
    ],
    "Home & Garden": [
        "Plant Pot", "Lamp", "Cushion", "Rug", "Curtains",
        "Wall Art", "Vase", "Candle", "Storage Box", "Clock",
    ],
    "Sports & Outdoors": [
        "Yoga Mat", "Dumbbell", "Water Bottle", "Tent", "Backpack",
        "Sleeping Bag", "Hiking Boots", "Bike Helmet", "Running Shoes", "Fitness Band",
    ],
    "Books": [
        "Mystery Novel", "Cookbook", "Self-Help Guide", "Biography", "Science Fiction",
        "History Book", "Travel Guide", "Poetry Collection", "Art Book", "Technical Manual",
    ],
    "Toys & Games": [
        "Board Game", "Puzzle", "Action Figure", "Building Blocks", "Doll",
        "RC Car", "Card Game", "Educational Toy", "Sports Ball", "Craft Kit",
    ],
    "Food & Beverages": [
        "Organic Coffee", "Green Tea", "Protein Bar", "Dried Fruits", "Nuts Mix",
        "Chocolate", "Honey", "Olive Oil", "Spice Set", "Energy Drink",
    ],
    "Health & Beauty": [
        "Moisturizer", "Shampoo", "Sunscreen", "Face Mask", "Lip Balm",
        "Hand Cream", "Body Lotion", "Essential Oil", "Vitamin Supplement", "Face Serum",
    ],
    "Automotive": [
        "Car Charger", "Air Freshener", "Phone Mount", "Seat Cover", "Floor Mat",
        "Cleaning Kit", "Tool Set", "Emergency Kit", "Dash Cam", "Tire Gauge",
    ],
    "Office Supplies": [
        "Notebook", "Pen Set", "Desk Organizer", "Stapler", "Paper Clips",
        "Folder", "Planner", "Sticky Notes", "Calculator", "Tape Dispenser",
    ],
}

ADJECTIVES: list[str] = [
    "Premium", "Deluxe", "Professional", "Ultimate", "Essential",
    "Compact", "Portable", "Advanced", "Classic", "Modern",
]

# {name}, {brand} and {category} are filled per product; category is lowercased
DESCRIPTION_TEMPLATES: list[str] = [
    "High-quality {name} from {brand}. Perfect for everyday use.",
    "Experience excellence with this {name} by {brand}. Built to last.",
    "{brand}'s {name} offers superior performance and reliability.",
    "Discover the perfect {name} for your needs. Made by {brand}.",
    "Premium {name} designed with care by {brand}. Exceptional value.",
    "Get the best {name} on the market from {brand}. Customer favorite.",
    "{brand} brings you an outstanding {name}. Quality guaranteed.",
    "Transform your {category} experience with this {name} from {brand}.",
    "Innovative {name} by {brand}. The smart choice for quality.",
    "Trusted {name} from {brand}. Loved by thousands of customers.",
]


def filter_options() -> dict[str, list[str]]:
    """Get the category and brand vocabularies offered as filters.

    Returns:
        Dict with "categories" and "brands" lists (copies).
    """
    return {"categories": list(CATEGORIES), "brands": list(BRANDS)}
