"""Default catalog taxonomy used for seeding.

Categories, brands with the categories they are offered in,
subcategories with their option names, and the values of each option
name. Option names recur across subcategories; each occurrence becomes
its own Option row with its own values.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SubcategoryDefinition:
    """A subcategory and the option names it defines.

    Attributes:
        name: Subcategory name.
        options: Option names, in display order.
    """

    name: str
    options: tuple[str, ...]


CATEGORIES: tuple[str, ...] = (
    "Men's Fashion",
    "Women's Fashion",
    "Electronics",
    "Home & Living",
    "Health & Beauty",
    "Sports & Outdoors",
    "Toys & Hobbies",
    "Books, Music & Media",
    "Groceries & Gourmet Food",
    "Automotive & Industrial",
    "Office & Stationery",
    "Pet Supplies",
    "Jewelry & Accessories",
    "Tools & Home Improvement",
)

BRANDS: dict[str, tuple[str, ...]] = {
    # Fashion
    "Nike": ("Men's Fashion", "Women's Fashion", "Sports & Outdoors", "Jewelry & Accessories"),
    "Adidas": ("Men's Fashion", "Women's Fashion", "Sports & Outdoors"),
    "Levi's": ("Men's Fashion", "Women's Fashion"),
    "Zara": ("Men's Fashion", "Women's Fashion"),
    "H&M": ("Men's Fashion", "Women's Fashion"),
    "Gucci": ("Men's Fashion", "Women's Fashion", "Jewelry & Accessories"),
    "Calvin Klein": ("Men's Fashion", "Women's Fashion"),
    "The North Face": ("Men's Fashion", "Women's Fashion", "Sports & Outdoors"),
    "Lululemon": ("Women's Fashion", "Sports & Outdoors"),
    "Patagonia": ("Men's Fashion", "Women's Fashion", "Sports & Outdoors"),
    "Under Armour": ("Men's Fashion", "Women's Fashion", "Sports & Outdoors"),
    "Puma": ("Men's Fashion", "Women's Fashion", "Sports & Outdoors"),
    "Rolex": ("Jewelry & Accessories",),
    "Casio": ("Jewelry & Accessories", "Electronics"),
    "Michael Kors": ("Women's Fashion", "Jewelry & Accessories"),
    "Ray-Ban": ("Jewelry & Accessories",),
    # Electronics
    "Apple": ("Electronics", "Office & Stationery"),
    "Samsung": ("Electronics", "Home & Living"),
    "Sony": ("Electronics", "Books, Music & Media"),
    "Dell": ("Electronics", "Office & Stationery"),
    "HP": ("Electronics", "Office & Stationery"),
    "LG": ("Electronics", "Home & Living"),
    "Bose": ("Electronics",),
    "JBL": ("Electronics",),
    "Canon": ("Electronics", "Office & Stationery"),
    "GoPro": ("Electronics", "Sports & Outdoors"),
    "Garmin": ("Electronics", "Sports & Outdoors"),
    "Logitech": ("Electronics", "Office & Stationery"),
    # Home
    "IKEA": ("Home & Living", "Office & Stationery"),
    "Dyson": ("Home & Living",),
    "Philips": ("Home & Living", "Health & Beauty", "Electronics"),
}

SUBCATEGORIES: dict[str, tuple[SubcategoryDefinition, ...]] = {
    "Men's Fashion": (
        SubcategoryDefinition("Tops", ("Color", "Size", "Material", "Fit", "Sleeve Style")),
        SubcategoryDefinition("Bottoms", ("Color", "Waist", "Length", "Material", "Fit")),
        SubcategoryDefinition("Outerwear", ("Color", "Size", "Material", "Weather Resistance")),
        SubcategoryDefinition("Footwear", ("Color", "Shoe Size", "Material", "Shoe Type")),
        SubcategoryDefinition("Suits & Blazers", ("Color", "Jacket Size", "Material", "Fit")),
    ),
    "Women's Fashion": (
        SubcategoryDefinition("Dresses", ("Color", "Size", "Material", "Dress Style", "Length")),
        SubcategoryDefinition("Tops & Blouses", ("Color", "Size", "Material", "Sleeve Style")),
        SubcategoryDefinition("Skirts & Jeans", ("Color", "Waist", "Length", "Material", "Fit")),
        SubcategoryDefinition("Lingerie & Sleepwear", ("Color", "Bra Size", "Size", "Material")),
        SubcategoryDefinition("Handbags", ("Color", "Material", "Bag Size")),
    ),
    "Electronics": (
        SubcategoryDefinition(
            "Computers & Laptops",
            ("RAM", "Storage", "Processor", "Screen Size", "Operating System"),
        ),
        SubcategoryDefinition(
            "Smartphones & Tablets",
            ("Color", "Storage", "Screen Size", "Operating System", "Connectivity"),
        ),
        SubcategoryDefinition(
            "TV & Home Theater",
            ("Screen Size", "Resolution", "Smart TV Platform", "HDR Format"),
        ),
        SubcategoryDefinition(
            "Audio & Headphones", ("Color", "Type", "Connectivity", "Noise Cancelling")
        ),
        SubcategoryDefinition(
            "Wearable Technology", ("Color", "Band Material", "Case Size", "Compatibility")
        ),
    ),
    "Sports & Outdoors": (
        SubcategoryDefinition("Athletic Apparel", ("Color", "Size", "Material", "Sport")),
        SubcategoryDefinition("Exercise & Fitness", ("Weight", "Type", "Material")),
        SubcategoryDefinition("Camping & Hiking", ("Capacity", "Weather Resistance", "Type")),
        SubcategoryDefinition("Cycling", ("Frame Size", "Color", "Type", "Brake Type")),
    ),
    "Jewelry & Accessories": (
        SubcategoryDefinition(
            "Watches", ("Movement", "Case Material", "Band Material", "Case Size")
        ),
        SubcategoryDefinition("Fine Jewelry", ("Metal Type", "Stone Type", "Style")),
        SubcategoryDefinition(
            "Sunglasses & Eyewear", ("Frame Material", "Lens Color", "Frame Shape")
        ),
        SubcategoryDefinition("Belts & Wallets", ("Material", "Color", "Size")),
    ),
}

# Option names without an entry (e.g. "Sport") are created without values
OPTION_VALUES: dict[str, tuple[str, ...]] = {
    "Color": (
        "Black", "White", "Gray", "Red", "Blue", "Green", "Yellow", "Pink",
        "Purple", "Orange", "Brown", "Beige", "Silver", "Gold", "Multi-color",
    ),
    "Material": (
        "Cotton", "Polyester", "Leather", "Denim", "Silk", "Wool", "Wood",
        "Metal", "Plastic", "Glass", "Ceramic", "Titanium", "Stainless Steel", "Canvas",
    ),
    "Size": ("XXS", "XS", "S", "M", "L", "XL", "XXL", "One Size", "3XL", "4XL"),
    "Type": ("Over-Ear", "In-Ear", "On-Ear", "Drill", "Sander", "Wrench"),
    "Fit": ("Slim", "Regular", "Relaxed", "Athletic", "Loose", "Skinny"),
    "Sleeve Style": ("Short Sleeve", "Long Sleeve", "Sleeveless", "3/4 Sleeve", "Cap Sleeve"),
    "Waist": ("28", "29", "30", "31", "32", "33", "34", "36", "38", "40"),
    "Length": (
        "28", "30", "32", "34", "36", "Short", "Regular", "Long", "Maxi", "Midi", "Mini",
    ),
    "Shoe Size": ("5", "6", "7", "8", "9", "10", "11", "12", "13", "14"),
    "Shoe Type": ("Sneakers", "Boots", "Formal Shoes", "Sandals", "Loafers", "Heels", "Flats"),
    "Jacket Size": ("36R", "38R", "40R", "42R", "44R", "38S", "40S", "42L"),
    "Dress Style": ("A-Line", "Bodycon", "Sheath", "Shift", "Wrap", "Maxi"),
    "Bra Size": ("32A", "32B", "34B", "34C", "36C", "36D", "38D"),
    "Bag Size": ("Small", "Medium", "Large", "Tote", "Crossbody"),
    "Storage": ("64GB", "128GB", "256GB", "512GB", "1TB", "2TB", "4TB"),
    "RAM": ("4GB", "8GB", "16GB", "32GB", "64GB"),
    "Processor": (
        "Intel i5", "Intel i7", "Intel i9", "AMD Ryzen 5", "AMD Ryzen 7", "Apple M2", "Apple M3",
    ),
    "Screen Size": ('11"', '13"', '14"', '15"', '16"', '17"', '24"', '27"', '32"', '55"', '65"', '75"'),
    "Operating System": ("Windows", "macOS", "ChromeOS", "iOS", "Android"),
    "Connectivity": ("Wi-Fi", "Bluetooth", "5G", "LTE", "HDMI", "USB-C", "NFC"),
    "Resolution": (
        "HD", "Full HD (1080p)", "QHD (1440p)", "4K UHD", "8K UHD", "12MP", "48MP", "108MP",
    ),
    "Smart TV Platform": ("Google TV", "Roku TV", "Fire TV", "webOS", "Tizen"),
    "HDR Format": ("HDR10", "Dolby Vision", "HLG"),
    "Noise Cancelling": ("Yes", "No", "Adaptive"),
    "Band Material": ("Silicone", "Stainless Steel", "Leather", "Nylon"),
    "Case Size": ("38mm", "40mm", "41mm", "44mm", "45mm", "49mm"),
    "Weather Resistance": ("Water-Resistant", "Waterproof", "Windproof"),
    "Brake Type": ("Disc", "Rim"),
    "Case Material": ("Stainless Steel", "Titanium", "Gold", "Ceramic"),
    "Metal Type": ("Sterling Silver", "14K Gold", "18K Gold", "Platinum"),
    "Stone Type": ("Diamond", "Sapphire", "Ruby", "Emerald", "None"),
    "Frame Material": ("Acetate", "Metal", "Titanium"),
    "Lens Color": ("Black", "Brown", "Green G-15", "Mirrored"),
    "Frame Shape": ("Aviator", "Wayfarer", "Round", "Cat-Eye"),
}
