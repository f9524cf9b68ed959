"""
Configuration settings for the Prospect ICP Engine
"""

from types import MappingProxyType
import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# RUNTIME CONFIGURATION
# =============================================================================

API_CONFIG = {
    "host": os.getenv("ICP_API_HOST", "0.0.0.0"),
    "port": int(os.getenv("ICP_API_PORT", "8000")),
    "cors_origins": [
        origin.strip()
        for origin in os.getenv("ICP_CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ],
}

LOG_LEVEL = os.getenv("ICP_LOG_LEVEL", "INFO").upper()

BATCH_MAX_WORKERS = int(os.getenv("ICP_BATCH_MAX_WORKERS", "4"))

# =============================================================================
# SCORE LIMITS
# =============================================================================

TOTAL_MIN = 0
TOTAL_MAX = 100
COMPANY_SIGNALS_CAP = 35
PRODUCT_CATEGORY_POINTS = 10
PROFILE_COMPLETENESS_POINTS = 5
PROFILE_ABOUT_MIN_LENGTH = 100

# ICP range bands, checked top-down
ICP_RANGES = (
    (70, "high"),
    (40, "medium"),
    (0, "low"),
)

# =============================================================================
# SEGMENT CLASSIFIER
# =============================================================================

# Matched as whole words
FREELANCER_INDICATORS = (
    "self-employed",
    "self employed",
    "freelance",
    "freelancer",
    "freelancing",
    "independent contractor",
    "independent consultant",
    "solopreneur",
    "solo",
)

# Company names that stand in for "no company"
FREELANCER_PLACEHOLDER_NAMES = (
    "",
    "self-employed",
    "self employed",
    "freelance",
    "freelancer",
    "independent",
)

# Matched as whole tokens, so "1 employee" does not fire inside "21 employees"
SINGLE_PERSON_SIZES = (
    "self-employed",
    "self employed",
    "1 employee",
    "0-1",
    "1-1",
    "just me",
)

AGENCY_INDUSTRIES = (
    "marketing",
    "advertising",
    "public relations",
    "design",
    "information technology",
    "it services",
    "it consulting",
    "consulting",
    "staffing",
    "recruiting",
    "professional services",
    "media production",
)

AGENCY_KEYWORDS = (
    "agency",
    "partner",
    "partners",
    "consulting",
    "consultancy",
    "help brands",
    "helping brands",
    "helps brands",
    "clients",
    "digital marketing",
    "shopify partner",
    "shopify plus partner",
    "shopify expert",
    "marketing services",
    "growth partner",
)

AGENCY_NAME_WORDS = (
    "agency",
    "partners",
    "consulting",
    "consultancy",
    "group",
    "studios",
)

MERCHANT_INDUSTRIES = (
    "retail",
    "consumer goods",
    "consumer products",
    "apparel",
    "fashion",
    "food & beverage",
    "food and beverage",
    "beverage",
    "food production",
    "jewelry",
    "jewellery",
    "cosmetics",
    "personal care",
    "luxury goods",
    "sporting goods",
    "wholesale",
    "manufacturing",
    "e-commerce",
    "ecommerce",
)

MERCHANT_KEYWORDS = (
    "brand",
    "products",
    "sell",
    "shop",
    "store",
    "dtc",
    "d2c",
    "direct-to-consumer",
    "direct to consumer",
    "shopify",
    "amazon",
    "e-commerce",
    "ecommerce",
    "fulfillment",
    "fulfilment",
    "manufacturer",
    "wholesale",
    "retail",
)

MERCHANT_NAME_WORDS = (
    "brand",
    "goods",
    "kitchen",
    "apparel",
    "wear",
    "shop",
    "store",
    "supply",
    "beauty",
    "foods",
    "products",
    "outfitters",
    "boutique",
)

# Titles that can break a tie when no business-type signal fired
C_SUITE_TERMS = (
    "ceo",
    "founder",
    "owner",
    "president",
    "coo",
    "chief",
)

TIEBREAK_AGENCY_INDUSTRY_TERMS = (
    "service",
    "consulting",
)

# =============================================================================
# TITLE AUTHORITY
# =============================================================================

# Single-word patterns up to this length only match as whole words
TITLE_ABBREVIATION_MAX_LENGTH = 3

# Applied to the lower-cased title before matching
TITLE_SYNONYMS = (
    ("vice president", "vp"),
    ("vice-president", "vp"),
)

CEO_TITLES = ("ceo", "chief executive officer", "chief executive")
FOUNDER_TITLES = ("founder", "co-founder", "cofounder", "co founder")
OWNER_TITLES = ("owner",)
COO_TITLES = ("coo", "chief operating officer", "chief operations officer")
PRESIDENT_TITLES = ("president",)
MANAGING_PARTNER_TITLES = ("managing partner", "general partner")
OPERATIONS_LEADERSHIP_TITLES = (
    "vp of operations",
    "vp operations",
    "vp, operations",
    "head of operations",
    "director of operations",
    "operations director",
)
ECOMMERCE_LEADERSHIP_TITLES = (
    "head of e-commerce",
    "head of ecommerce",
    "vp of e-commerce",
    "vp of ecommerce",
    "vp e-commerce",
    "vp ecommerce",
    "director of e-commerce",
    "director of ecommerce",
    "e-commerce director",
    "ecommerce director",
)
PARTNERSHIP_DIRECTOR_TITLES = (
    "director of partnerships",
    "partnerships director",
    "head of partnerships",
    "vp of partnerships",
    "vp partnerships",
)


def _dedupe(*groups):
    return tuple(dict.fromkeys(title for group in groups for title in group))


TOP_TIER_TITLES = _dedupe(
    CEO_TITLES,
    FOUNDER_TITLES,
    OWNER_TITLES,
    COO_TITLES,
    PRESIDENT_TITLES,
    MANAGING_PARTNER_TITLES,
    OPERATIONS_LEADERSHIP_TITLES,
    ECOMMERCE_LEADERSHIP_TITLES,
    PARTNERSHIP_DIRECTOR_TITLES,
)

SECONDARY_TIER_TITLES = (
    "vp of client success",
    "vp client success",
    "vp of customer success",
    "head of client success",
    "director of client success",
    "client success director",
    "director of partner success",
    "partner",
    "principal",
    "operations manager",
    "head of fulfillment",
    "head of fulfilment",
    "supply chain director",
    "director of supply chain",
    "e-commerce manager",
    "ecommerce manager",
)

LEADERSHIP_TITLES = (
    "director",
    "head of",
    "vp",
    "svp",
    "evp",
    "chief",
    "cmo",
    "cto",
    "cfo",
    "cro",
    "cco",
    "general manager",
)

SENIOR_TITLES = (
    "senior",
    "sr.",
    "sr",
    "lead",
)

# (points, tier name, patterns), checked top-down
TITLE_TIERS = (
    (40, "top", TOP_TIER_TITLES),
    (30, "secondary", SECONDARY_TIER_TITLES),
    (20, "leadership", LEADERSHIP_TITLES),
    (10, "senior", SENIOR_TITLES),
)

# =============================================================================
# COMPANY SIGNALS
# =============================================================================

# Rules in the same group are exclusive: the first match wins.
COMPANY_SIGNAL_LIBRARY = (
    {
        "tag": "SCALE",
        "category": "scale_indicators",
        "pattern": (
            r"millions of (customers|users|orders|units)"
            r"|\d+\s*(\+\s*)?million\s+(customers|users|orders|units)"
            r"|\$\s?\d+(\.\d+)?\s?(m|mm|b|million|billion)\b"
            r"|\b(7|8|9|seven|eight|nine)[- ]figure"
            r"|best[- ]?sell(er|ers|ing)"
            r"|inc\.?\s?5000"
            r"|fortune 500"
            r"|fastest[- ]growing"
        ),
        "weight": 15,
    },
    {
        "tag": "SHOPIFY_PLUS",
        "category": "platform_signals",
        "group": "shopify",
        "pattern": r"shopify\s*plus",
        "weight": 12,
    },
    {
        "tag": "SHOPIFY",
        "category": "platform_signals",
        "group": "shopify",
        "pattern": r"shopify",
        "weight": 10,
    },
    {
        "tag": "AMAZON_SELLER",
        "category": "platform_signals",
        "pattern": (
            r"amazon\s+(fba|seller|sellers|store|brand|brands|marketplace)"
            r"|\b(sell|sells|selling|sold|available)\s+on\s+amazon"
            r"|\bfba\b"
        ),
        "weight": 10,
    },
    {
        "tag": "BIGCOMMERCE",
        "category": "platform_signals",
        "pattern": r"bigcommerce",
        "weight": 8,
    },
    {
        "tag": "WOOCOMMERCE_MAGENTO",
        "category": "platform_signals",
        "pattern": r"woocommerce|magento",
        "weight": 6,
    },
    {
        "tag": "DTC",
        "category": "dtc_signals",
        "pattern": r"\bdtc\b|\bd2c\b|direct[- ]to[- ]consumer",
        "weight": 10,
    },
    {
        "tag": "ECOMMERCE",
        "category": "dtc_signals",
        "pattern": r"e-commerce|ecommerce",
        "weight": 8,
    },
    {
        "tag": "ONLINE_STORE",
        "category": "dtc_signals",
        "pattern": r"online\s+(store|shop|brand)",
        "weight": 6,
    },
    {
        "tag": "FULFILLMENT",
        "category": "fulfillment_signals",
        "segment": "merchant",
        "pattern": r"fulfil?ment|logistics|warehous|\b3pl\b|supply chain|shipping",
        "weight": 8,
    },
    {
        "tag": "SHOPIFY_PARTNER",
        "category": "agency_signals",
        "segment": "agency",
        "pattern": r"shopify\s+(plus\s+)?(partner|expert)",
        "weight": 12,
    },
    {
        "tag": "CLIENT_BRANDS",
        "category": "agency_signals",
        "segment": "agency",
        "all_of": (r"\bclients\b", r"\bbrands\b"),
        "weight": 5,
    },
    {
        "tag": "COMMERCE_TERMS",
        "category": "general_signals",
        "pattern": r"\bbrands?\b|\bproducts?\b|customer base|\bcustomers\b",
        "weight": 5,
    },
)

# Industry bonus, matched against the industry string only
HIGH_VALUE_INDUSTRIES = (
    "retail",
    "consumer goods",
    "consumer products",
    "apparel",
    "fashion",
    "food & beverage",
    "food and beverage",
    "beverages",
    "food production",
    "jewelry",
    "jewellery",
    "cosmetics",
    "beauty",
    "personal care",
    "health and wellness",
    "sporting goods",
    "luxury goods",
    "home goods",
    "furniture",
    "pet supplies",
    "pet products",
    "e-commerce",
    "ecommerce",
)

INDUSTRY_BONUS = {
    "tag": "HIGH_VALUE_INDUSTRY",
    "category": "industry_bonus",
    "segment": "merchant",
    "weight": 10,
}

# =============================================================================
# PRODUCT CATEGORIES
# =============================================================================

PRODUCT_CATEGORY_PATTERN = (
    r"\b("
    r"jewel(le)?ry|supplements?|skin\s?care|cosmetics|makeup|beauty"
    r"|apparel|fashion|clothing|swimwear|footwear|shoes|activewear"
    r"|kitchen(ware)?|cookware|home goods|home decor|furniture|candles?"
    r"|coffee|tea|snacks?|beverages?|wine|spirits"
    r"|pets?|pet food|toys|baby"
    r"|fitness|nutrition|wellness"
    r")\b"
)

# =============================================================================
# COMPANY SIZE
# =============================================================================

# (substring, midpoint), checked top-down so larger ranges win
COMPANY_SIZE_MIDPOINTS = (
    ("10001", 7500),
    ("10000", 7500),
    ("5001", 7500),
    ("1001-5000", 2500),
    ("1000+", 2500),
    ("501-1000", 750),
    ("500+", 750),
    ("201-500", 350),
    ("51-200", 100),
    ("11-50", 30),
    ("2-10", 5),
    ("1-10", 5),
    ("self-employed", 5),
    ("self employed", 5),
)

# (min, max, points) per segment, checked top-down; None is open-ended
COMPANY_SIZE_BANDS = MappingProxyType({
    "agency": (
        (10, 100, 15),
        (101, 200, 10),
        (201, 500, 5),
        (501, None, -10),
        (2, 9, 5),
        (None, 1, -5),
    ),
    "merchant": (
        (10, 200, 15),
        (201, 500, 10),
        (501, None, 5),
        (2, 9, 5),
        (None, 1, 0),
    ),
    "freelancer": (),
})

UNKNOWN_SIZE_POINTS = MappingProxyType({
    "agency": 5,
    "merchant": 5,
    "freelancer": 0,
})
