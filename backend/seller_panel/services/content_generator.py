"""
Product Content Generator

Template-based copywriting for product listings and social media.
No model is involved: the product type is detected from the product name
with keyword patterns, then static templates for that type are filled in.

Features:
- Full and short product descriptions
- SEO title / meta description
- Tone rewrites (professional, casual, luxury)
- Per-platform social posts and hashtags

Author: Amzify Team
Date: 2025-11-08
"""
import logging
import random
import re
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

# ============================================================================
# PRODUCT TYPE DETECTION
# ============================================================================

# Checked in order; first match wins
PRODUCT_PATTERNS = {
    # Electronics
    "headphones": re.compile(r"headphone|earphone|earbud|airpod", re.I),
    "phone": re.compile(r"phone|smartphone|mobile", re.I),
    "laptop": re.compile(r"laptop|notebook|macbook", re.I),
    "tablet": re.compile(r"tablet|ipad", re.I),
    "watch": re.compile(r"watch|smartwatch", re.I),
    "camera": re.compile(r"camera|webcam|gopro", re.I),
    "speaker": re.compile(r"speaker|soundbar", re.I),
    "charger": re.compile(r"charger|adapter|cable", re.I),

    # Fashion
    "shirt": re.compile(r"shirt|tshirt|t-shirt|blouse|top", re.I),
    "jeans": re.compile(r"jean|denim|pant|trouser", re.I),
    "dress": re.compile(r"dress|gown|frock", re.I),
    "shoes": re.compile(r"shoe|sneaker|boot|sandal|heel", re.I),
    "bag": re.compile(r"bag|backpack|purse|handbag", re.I),

    # Home
    "chair": re.compile(r"chair|seat|stool", re.I),
    "table": re.compile(r"table|desk", re.I),
    "lamp": re.compile(r"lamp|light|chandelier", re.I),
    "bed": re.compile(r"bed|mattress", re.I),

    # Health & Fitness
    "yoga": re.compile(r"yoga|pilates", re.I),
    "dumbell": re.compile(r"dumbell|weight|barbell", re.I),
    "bottle": re.compile(r"bottle|flask|tumbler", re.I),

    # Kitchen
    "blender": re.compile(r"blender|mixer|grinder", re.I),
    "pan": re.compile(r"pan|pot|cookware", re.I),
    "knife": re.compile(r"knife|cutter", re.I),
}


def detect_product_type(product_name: str) -> str:
    """Return the first matching product type, or 'generic'"""
    for product_type, pattern in PRODUCT_PATTERNS.items():
        if pattern.search(product_name):
            return product_type
    return "generic"


# ============================================================================
# DESCRIPTION TEMPLATES
# ============================================================================

DESCRIPTION_TEMPLATES: Dict[str, Dict] = {
    "headphones": {
        "short": [
            "Crystal-clear audio with premium {product} - Immerse yourself in sound",
            "Wireless {product} with superior noise cancellation technology",
            "Experience studio-quality sound with our {product}",
        ],
        "full": (
            "Experience audio perfection with our premium {product}. Featuring advanced noise-cancellation "
            "technology and high-fidelity drivers, these deliver crystal-clear sound that brings your music to life."
            "\n\n"
            "The ergonomic design ensures all-day comfort, while the long-lasting battery keeps you connected for "
            "hours. Whether you're commuting, working out, or relaxing at home, enjoy immersive audio that "
            "transforms every listening experience."
            "\n\n"
            "With intuitive touch controls and seamless Bluetooth connectivity, managing your music has never been "
            "easier. The premium build quality and stylish design make these {product} the perfect companion for "
            "music lovers who refuse to compromise on quality."
        ),
    },
    "phone": {
        "short": [
            "Powerful {product} with cutting-edge performance and stunning display",
            "Next-gen {product} - Capture life in brilliant detail",
            "Ultra-fast {product} designed for modern life",
        ],
        "full": (
            "Introducing the revolutionary {product} that redefines mobile excellence. Powered by the latest "
            "processor and stunning display technology, this smartphone delivers blazing-fast performance for "
            "everything from gaming to productivity."
            "\n\n"
            "Capture professional-quality photos with the advanced camera system featuring AI-enhanced imaging and "
            "night mode. The long-lasting battery ensures you stay connected all day, while fast charging gets you "
            "back to 100% in minutes."
            "\n\n"
            "With 5G connectivity, ample storage, and a sleek design that feels premium in hand, this {product} is "
            "engineered for those who demand the best. Experience the future of mobile technology today."
        ),
    },
    "laptop": {
        "short": [
            "Powerful {product} for professionals - Performance meets portability",
            "Ultra-thin {product} with all-day battery life",
            "High-performance {product} built for productivity",
        ],
        "full": (
            "Meet your new productivity powerhouse - the {product} designed for professionals who demand "
            "excellence. Featuring a powerful processor, stunning high-resolution display, and lightning-fast SSD "
            "storage, this laptop handles everything from creative work to data analysis with ease."
            "\n\n"
            "The premium aluminum chassis is both durable and lightweight, making it perfect for working on the go. "
            "With all-day battery life, you can work unplugged from morning meetings to evening presentations "
            "without worrying about charging."
            "\n\n"
            "Advanced cooling keeps performance optimal even during intensive tasks, while the backlit keyboard and "
            "precision trackpad ensure comfortable, accurate input. Whether you're coding, designing, or managing "
            "projects, this {product} delivers the performance and reliability you need to excel."
        ),
    },
    "shirt": {
        "short": [
            "Premium {product} - Comfort and style in perfect harmony",
            "Breathable {product} for all-day comfort",
            "Classic {product} that never goes out of style",
        ],
        "full": (
            "Elevate your wardrobe with our premium {product}, crafted from high-quality fabrics that feel as good "
            "as they look. The perfect blend of comfort and style, this piece is designed for modern living and "
            "timeless fashion."
            "\n\n"
            "The breathable material keeps you comfortable throughout the day, while the tailored fit flatters "
            "every body type. Whether you're heading to the office, meeting friends, or enjoying a casual weekend, "
            "this versatile {product} adapts effortlessly to any occasion."
            "\n\n"
            "Easy to care for and built to last, it maintains its shape and color wash after wash. Available in "
            "multiple colors and sizes, find your perfect match and experience the difference that quality "
            "clothing makes in your daily confidence."
        ),
    },
    "shoes": {
        "short": [
            "Comfortable {product} engineered for all-day wear",
            "Stylish {product} with superior cushioning and support",
            "Premium {product} - Where fashion meets function",
        ],
        "full": (
            "Step into comfort and style with our premium {product}, expertly crafted using advanced footwear "
            "technology and high-quality materials. The innovative cushioning system provides superior support for "
            "all-day wear, whether you're walking, running, or standing."
            "\n\n"
            "The breathable design keeps your feet cool and dry, while the durable outsole offers excellent "
            "traction on various surfaces. The modern aesthetic seamlessly transitions from gym to street, making "
            "these the most versatile {product} in your collection."
            "\n\n"
            "With reinforced stitching and quality construction, these are built to withstand daily wear while "
            "maintaining their fresh appearance. Experience the perfect combination of performance, comfort, and "
            "style that keeps you moving with confidence."
        ),
    },
    "watch": {
        "short": [
            "Smart {product} that tracks your health and keeps you connected",
            "Elegant {product} with advanced fitness monitoring",
            "Premium {product} - Style meets technology",
        ],
        "full": (
            "Discover the perfect blend of style and technology with our advanced {product}. This isn't just a "
            "timepiece – it's your personal health coach, fitness tracker, and communication hub all wrapped in "
            "an elegant design."
            "\n\n"
            "Monitor your heart rate, track workouts, analyze sleep patterns, and stay on top of your wellness "
            "goals with comprehensive health features. Receive notifications, control music, and stay connected "
            "without reaching for your phone, all from your wrist."
            "\n\n"
            "The premium build quality features scratch-resistant display and water resistance for everyday "
            "durability. With customizable watch faces and interchangeable bands, express your personal style "
            "while enjoying cutting-edge technology that enhances your daily life."
        ),
    },
    "bag": {
        "short": [
            "Spacious {product} with organized compartments for modern life",
            "Durable {product} designed for everyday adventures",
            "Stylish {product} - Carry everything in comfort",
        ],
        "full": (
            "Organize your life in style with our premium {product}, thoughtfully designed with multiple "
            "compartments and pockets to keep everything in its place. From laptops to water bottles, this "
            "versatile bag has a dedicated spot for all your essentials."
            "\n\n"
            "Crafted from durable, water-resistant materials, it protects your belongings while withstanding daily "
            "wear and tear. The padded shoulder straps and ergonomic design ensure comfortable carrying even when "
            "fully loaded, making it perfect for commutes, travel, or daily adventures."
            "\n\n"
            "The sleek, modern aesthetic transitions seamlessly from professional settings to casual outings. With "
            "reinforced stitching and quality zippers built to last, this {product} is an investment in organized, "
            "stylish living that serves you reliably for years."
        ),
    },
    "bottle": {
        "short": [
            "Insulated {product} keeps drinks perfect for 24 hours",
            "Eco-friendly {product} for hydration on the go",
            "Leak-proof {product} designed for active lifestyles",
        ],
        "full": (
            "Stay hydrated in style with our premium {product}, featuring advanced insulation technology that keeps "
            "cold drinks icy for 24 hours and hot beverages steaming for 12 hours. Perfect for workouts, commutes, "
            "or outdoor adventures."
            "\n\n"
            "The durable, BPA-free construction ensures safe, pure-tasting hydration every time, while the "
            "leak-proof cap lets you toss it in your bag worry-free. The ergonomic design fits comfortably in hand "
            "and most cup holders for convenient portability."
            "\n\n"
            "Easy to clean with a wide mouth opening and available in vibrant colors that resist scratches and "
            "fading. Make the sustainable choice without compromising on performance – this {product} is your "
            "perfect hydration companion for every activity."
        ),
    },
    "chair": {
        "short": [
            "Ergonomic {product} designed for all-day comfort and support",
            "Premium {product} - Transform your workspace",
            "Stylish {product} with lumbar support",
        ],
        "full": (
            "Transform your workspace with our ergonomically designed {product}, engineered to provide optimal "
            "support and comfort during long work sessions. The advanced lumbar support and adjustable features "
            "promote healthy posture and reduce fatigue."
            "\n\n"
            "Premium cushioning and breathable materials keep you comfortable throughout the day, while the sturdy "
            "construction supports up to 300 lbs with confidence. Smooth-rolling casters and 360-degree swivel "
            "enhance mobility and functionality in any workspace."
            "\n\n"
            "The modern, sleek design complements any office décor, from home offices to corporate settings. "
            "Easy to assemble and built to last, this {product} is an investment in your health, comfort, and "
            "productivity that pays dividends every single day."
        ),
    },
}

GENERIC_TEMPLATE = {
    "short": [
        "Premium {product} crafted for excellence and everyday use",
        "High-quality {product} designed to exceed your expectations",
        "Professional-grade {product} at an exceptional value",
    ],
    "full": (
        "Discover our exceptional {product}, meticulously crafted to deliver outstanding performance and value. "
        "Built with premium materials and attention to detail, this product combines functionality with modern "
        "aesthetics."
        "\n\n"
        "Whether for professional use or personal enjoyment, the intuitive design ensures ease of use while the "
        "durable construction guarantees long-lasting reliability. Experience the perfect balance of quality, "
        "innovation, and affordability."
        "\n\n"
        "Backed by our commitment to customer satisfaction, this {product} represents a smart investment in "
        "quality that enhances your daily life. Join thousands of satisfied customers who have made the upgrade "
        "to excellence."
    ),
}

SEO_KEYWORDS = {
    "headphones": "Wireless, Noise Cancelling, Premium Audio",
    "phone": "Smartphone, 5G, Latest Technology",
    "laptop": "High Performance, Portable, Professional",
    "watch": "Smartwatch, Fitness Tracker, Wearable",
    "shirt": "Fashion, Comfortable, Stylish",
    "shoes": "Footwear, Comfortable, Durable",
    "bag": "Backpack, Spacious, Organized",
    "bottle": "Insulated, Eco-Friendly, Hydration",
    "chair": "Ergonomic, Office, Comfortable",
}

SEO_TITLE_MAX = 60
SEO_DESCRIPTION_MAX = 160

# Applied in order, case-insensitive, to any occurrence (also inside words)
TONE_REPLACEMENTS = {
    "professional": [
        ("amazing", "exceptional"),
        ("great", "outstanding"),
        ("good", "superior"),
        ("nice", "premium"),
    ],
    "casual": [
        ("exceptional", "amazing"),
        ("outstanding", "awesome"),
        ("superior", "great"),
        ("premium", "really nice"),
    ],
    "luxury": [
        ("good", "exquisite"),
        ("great", "prestigious"),
        ("nice", "refined"),
        ("quality", "unparalleled quality"),
    ],
}


def _template_for(product_name: str) -> Dict:
    return DESCRIPTION_TEMPLATES.get(detect_product_type(product_name), GENERIC_TEMPLATE)


def generate_description(product_name: str, category: Optional[str] = None) -> str:
    """Three-paragraph listing description for the detected product type"""
    product_type = detect_product_type(product_name)
    logger.info(f"Generating description for '{product_name}' (type: {product_type})")
    return _template_for(product_name)["full"].replace("{product}", product_name)


def generate_short_description(
    product_name: str,
    category: Optional[str] = None,
    rng: Optional[random.Random] = None
) -> str:
    """One-liner picked at random from the type's short templates"""
    options = _template_for(product_name)["short"]
    chooser = rng or random
    return chooser.choice(options).replace("{product}", product_name)


def generate_seo(product_name: str, description: str) -> Dict[str, str]:
    """
    SEO title and meta description

    Returns:
        {'title': <= 60 chars, 'description': <= 160 chars}
    """
    keyword = SEO_KEYWORDS.get(detect_product_type(product_name), "Premium Quality")
    title = f"{product_name} - {keyword} | Buy Now"
    meta = f"Shop {product_name} online. {description[:90]}... Fast shipping & great prices."

    return {
        "title": title[:SEO_TITLE_MAX],
        "description": meta[:SEO_DESCRIPTION_MAX],
    }


def improve_description(current_description: str, tone: str = "professional") -> str:
    """
    Rewrite vocabulary for a tone

    Raises:
        ValueError: unknown tone
    """
    if tone not in TONE_REPLACEMENTS:
        raise ValueError(f"Unknown tone: {tone}. Use one of {', '.join(TONE_REPLACEMENTS)}")

    improved = current_description
    for source, target in TONE_REPLACEMENTS[tone]:
        improved = re.sub(re.escape(source), target, improved, flags=re.I)
    return improved


# ============================================================================
# SOCIAL MEDIA
# ============================================================================

SOCIAL_POST_TEMPLATES = {
    "facebook": (
        "\U0001F389 Introducing our amazing {product}! \n\n"
        "We're excited to share this incredible product with you. Perfect for anyone looking to upgrade their "
        "experience with premium quality and outstanding performance.\n\n"
        "Check it out now and see the difference for yourself! \U0001F4AB"
    ),
    "instagram": (
        "✨ NEW ARRIVAL ✨\n\n"
        "{product} is here! \U0001F525\n\n"
        "Premium quality meets unbeatable value. \n"
        "Your perfect choice for style and performance.\n\n"
        "\U0001F6CD️ Shop now - Link in bio"
    ),
    "twitter": (
        "\U0001F680 Just dropped: {product}\n\n"
        "Premium quality | Great value | Fast shipping\n\n"
        "Get yours today! \U0001F525"
    ),
    "linkedin": (
        "We're proud to announce the launch of our {product}.\n\n"
        "Developed with precision and designed for professionals who demand excellence, this product represents "
        "our commitment to quality and innovation.\n\n"
        "Discover how it can enhance your workflow and deliver exceptional results."
    ),
    "youtube": (
        "Welcome back! Today we're showcasing our {product}.\n\n"
        "In this video, you'll discover all the amazing features and benefits that make this product stand out. "
        "Whether you're a beginner or professional, you'll find incredible value here.\n\n"
        "Watch till the end for exclusive tips and special offers!\n\n"
        "Don't forget to like, subscribe, and hit that notification bell! \U0001F514"
    ),
}

COMMON_HASHTAGS = ["#NewArrival", "#ShopNow", "#QualityProducts", "#OnlineShopping"]
MAX_HASHTAGS = 10

TONE_EMOJIS = {
    "engaging": ["\U0001F389", "✨", "\U0001F525", "\U0001F4AB", "⭐"],
    "professional": ["\U0001F4CA", "\U0001F4BC", "\U0001F3AF", "✅", "\U0001F4C8"],
    "casual": ["\U0001F60A", "\U0001F44D", "\U0001F4AF", "\U0001F64C", "❤️"],
}


def generate_social_post(product_name: str, platform: str, product_info: Optional[str] = None) -> str:
    """Launch post for a platform; unknown platforms get the Facebook copy"""
    template = SOCIAL_POST_TEMPLATES.get(platform, SOCIAL_POST_TEMPLATES["facebook"])
    return template.replace("{product}", product_name)


def generate_hashtags(product_name: str, category: Optional[str] = None) -> str:
    """Comma-separated hashtags: product, category, then common tags (max 10)"""
    tags: List[str] = ["#" + re.sub(r"\s+", "", product_name)]

    if category:
        tags.append("#" + re.sub(r"\s+", "", category))
        tags.append("#BestOf" + category.split(" ")[0])

    tags.extend(COMMON_HASHTAGS)
    return ", ".join(tags[:MAX_HASHTAGS])


def improve_social_post(current_post: str, platform: str, tone: str = "engaging") -> str:
    """
    Prefix the post with the tone's lead emoji

    Raises:
        ValueError: unknown tone
    """
    if tone not in TONE_EMOJIS:
        raise ValueError(f"Unknown tone: {tone}. Use one of {', '.join(TONE_EMOJIS)}")
    return f"{TONE_EMOJIS[tone][0]} {current_post}"
