"""
Staging Knowledge Base

방 종류 추정 + 치울 물건 판단 + 스테이징 팁을 위한 정적 DB

- ROOM_INDICATORS: 방 종류별 strong/medium/weak 키워드 티어
- FURNITURE_KEEP_SET: 절대 치우라고 추천하지 않는 고정/대형 가구
- MOVABLE_FURNITURE_SET: 목록에서는 빼고 스타일링 팁에서 다루는 이동식 가구
- CLUTTER_VOCABULARY / CLUTTER_REASON_RULES: 치울 물건과 그 사유
- STYLING_TIPS: 방 종류별 스테이징 팁
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple

from photoprep.types import ItemCategory, RoomType


RULES_VERSION = "2024.3"

TIERS: Tuple[str, ...] = ("strong", "medium", "weak")


# =============================================================================
# Room Indicators
# =============================================================================

ROOM_INDICATORS: Mapping[RoomType, Mapping[str, FrozenSet[str]]] = MappingProxyType({
    RoomType.KITCHEN: MappingProxyType({
        "strong": frozenset(["oven", "microwave", "refrigerator", "stove", "dishwasher", "sink", "countertop"]),
        "medium": frozenset(["toaster", "kettle", "pot", "pan", "glass", "cup", "plate", "bowl", "dish",
                             "bottle", "fork", "spoon", "knife"]),
        "weak": frozenset(["table", "chair", "cabinet", "drawer", "light"]),
    }),
    RoomType.BATHROOM: MappingProxyType({
        "strong": frozenset(["toilet", "bathtub", "shower", "sink", "mirror"]),
        "medium": frozenset(["towel", "toothbrush", "shampoo", "soap", "lotion", "toilet paper", "tissue"]),
        "weak": frozenset(["cabinet", "light", "door"]),
    }),
    RoomType.BEDROOM: MappingProxyType({
        "strong": frozenset(["bed", "bedspread", "pillow", "blanket", "nightstand", "dresser"]),
        "medium": frozenset(["lamp", "mirror", "chair", "desk", "closet", "hanger"]),
        "weak": frozenset(["wall", "floor", "window", "door"]),
    }),
    RoomType.LIVING_ROOM: MappingProxyType({
        "strong": frozenset(["couch", "sofa", "tv", "coffee table", "armchair", "recliner"]),
        "medium": frozenset(["lamp", "rug", "picture", "cushion", "throw pillow", "ottoman"]),
        "weak": frozenset(["chair", "table", "wall", "window", "light"]),
    }),
    RoomType.DINING_ROOM: MappingProxyType({
        "strong": frozenset(["dining table", "chair", "place setting"]),
        "medium": frozenset(["plate", "glass", "fork", "knife", "spoon", "napkin", "centerpiece"]),
        "weak": frozenset(["table", "chandelier", "wall", "window"]),
    }),
})


# =============================================================================
# Confidence Admission
# =============================================================================

# 오탐 비용이 낮아 낮은 임계치로 받아들이는 클래스
PRIORITY_CLASSES: Tuple[str, ...] = (
    "person", "dog", "cat", "bottle", "cup", "bowl", "phone", "laptop",
)

ROOM_PRIORITY_CLASSES: Mapping[RoomType, Tuple[str, ...]] = MappingProxyType({
    RoomType.KITCHEN: ("cup", "plate", "bowl", "bottle", "fork", "knife", "spoon"),
    RoomType.BATHROOM: ("towel", "toothbrush", "soap", "tissue"),
    RoomType.BEDROOM: ("pillow", "blanket", "clothes"),
})


# =============================================================================
# Furniture
# =============================================================================

FURNITURE_KEEP_SET: FrozenSet[str] = frozenset([
    "couch", "sofa", "loveseat", "sectional",
    "bed", "king bed", "queen bed",
    "dining table", "table",
    "toilet", "bathtub", "shower",
    "tv", "television",
    "sink", "oven", "refrigerator", "fridge", "stove", "dishwasher",
    "microwave", "washer", "dryer",
    "bookcase", "bookshelf", "cabinet", "wardrobe", "armoire",
    "wall", "door", "window", "ceiling", "floor",
])

MOVABLE_FURNITURE_SET: FrozenSet[str] = frozenset([
    "chair", "dining chair", "office chair", "desk chair", "folding chair",
    "stool", "bar stool", "ottoman", "footstool", "pouf",
    "side table", "end table", "nightstand", "accent table",
    "bench", "small table",
])

# 거실 팁에서 "의자"로 세는 이동식 가구
SEATING_KEYWORDS: Tuple[str, ...] = ("chair", "stool")


# =============================================================================
# Clutter
# =============================================================================

CLUTTER_VOCABULARY: FrozenSet[str] = frozenset([
    # People and pets
    "person", "people", "human", "man", "woman", "child", "kid", "baby",
    "dog", "cat", "bird", "pet", "animal",

    # Personal belongings
    "backpack", "handbag", "suitcase", "umbrella", "tie", "bag", "purse", "wallet", "jacket", "coat",
    "sweater", "shirt", "pants", "shoes", "briefcase", "luggage", "duffel bag", "tote bag",
    "shoulder bag", "crossbody bag", "messenger bag", "scarf", "hat", "cap", "beanie", "gloves",
    "socks", "underwear", "vest", "hoodie", "sweatshirt", "cardigan", "blazer", "dress", "skirt",
    "shorts", "jeans", "sneakers", "boot", "sandal", "slipper", "heel", "loafer", "flip flop",

    # Electronics
    "cell phone", "mobile phone", "smartphone", "iphone", "android", "remote", "laptop", "notebook",
    "keyboard", "mouse", "monitor", "display", "screen", "phone", "tablet", "ipad", "computer",
    "desktop", "workstation", "headphones", "earbuds", "speaker", "bluetooth speaker", "camera",
    "webcam", "printer", "scanner", "router", "modem", "charger", "power bank", "cable",
    "cord", "wire", "extension cord", "power cord", "adapter", "hub", "dock",

    # Kitchen clutter
    "bottle", "wine glass", "cup", "fork", "knife", "spoon", "bowl", "pot", "pan",
    "plate", "dish", "glass", "mug", "utensil", "cutlery", "silverware", "dinnerware", "flatware",
    "drinking glass", "coffee cup", "tea cup", "saucer", "platter", "pitcher", "kettle", "teapot",
    "container", "tupperware", "jar", "lid", "sauce", "condiment", "spice", "seasoning",
    "baking tray", "cookie sheet", "cake pan", "baking pan", "mixing bowl", "colander", "strainer",
    "cutting board", "knife block", "spatula", "wooden spoon", "ladle", "whisk", "grater",
    "can opener", "bottle opener", "corkscrew", "measuring cup", "measuring spoon",

    # Food
    "banana", "apple", "sandwich", "orange", "broccoli", "carrot", "hot dog", "pizza", "donut", "cake",
    "food", "fruit", "vegetable", "meat", "bread", "cheese", "milk", "drink", "juice", "soda",
    "coffee", "tea", "beer", "wine", "alcohol", "snack", "chip", "cookie", "candy", "chocolate",

    # Sports equipment
    "sports ball", "baseball bat", "tennis racket", "frisbee", "skateboard", "surfboard", "skis",
    "snowboard", "bicycle", "bike", "tricycle", "scooter", "roller skate",
    "weights", "dumbbell", "barbell", "kettlebell", "yoga mat", "exercise ball", "foam roller",
    "resistance band", "jump rope", "boxing glove", "baseball glove", "football", "soccer ball",
    "basketball", "tennis ball", "golf ball", "bowling ball", "ping pong", "shuttlecock",

    # Toys
    "teddy bear", "kite", "toy", "doll", "game", "puzzle", "lego", "action figure",
    "toy train", "toy car", "toy plane", "toy block", "bouncy ball", "toy animal",

    # Bathroom
    "toothbrush", "toothpaste", "shampoo", "soap", "lotion", "cosmetics", "makeup",
    "towel", "bath towel", "hand towel", "washcloth", "face washer", "bath mat", "shower curtain",
    "bathroom mat", "hair drier", "hair dryer", "blow dryer", "brush", "comb", "hair brush",
    "paddle brush", "razor", "safety razor", "perfume", "cologne", "deodorant", "antiperspirant",
    "tissue", "tissue box", "cotton", "cotton ball", "cotton pad", "q-tip", "qtip",
    "lipstick", "foundation", "concealer", "eyeshadow", "eyeliner", "mascara",
    "bathroom accessories", "toiletries", "bath products", "shower gel", "body wash", "moisturizer",
    "soap dispenser", "lotion pump", "toothbrush holder", "bathroom caddy", "shower caddy",

    # Bedroom
    "pillow", "blanket", "sheet", "comforter", "bedspread", "duvet", "mattress", "pillow case",
    "pillowcase", "nightstand", "dresser", "chest", "closet", "wardrobe", "hanger", "coat hanger",
    "shoe rack", "bed frame", "headboard", "footboard", "bed skirt",

    # Living room
    "cushion", "throw pillow", "throw blanket", "couch throw", "ottoman", "footstool", "pouf",
    "side table", "end table", "coffee table", "armchair", "recliner", "accent chair",

    # Office / desk
    "scissors", "pen", "pencil", "marker", "crayon", "colored pencil",
    "paper", "document", "mail", "magazine", "newspaper", "journal", "notepad",
    "clipboard", "folder", "binder", "stapler", "tape", "glue",
    "desk lamp", "desk organizer", "pen holder", "pencil holder", "sticky note", "post-it",

    # Storage
    "box", "basket", "pouch", "case", "storage box", "plastic bin",
    "drawer organizer", "shelf organizer", "closet organizer", "under bed storage",

    # Wall decor
    "picture", "photo", "poster", "artwork", "frame", "framed art", "wall art", "wall decor",
    "mirror", "wall mirror", "floor mirror", "decorative mirror",

    # Decor
    "candle", "decoration", "ornament", "figurine", "statue", "sculpture",
    "flower", "plant", "flowers", "bouquet", "vase", "flower vase", "potted plant",
    "book", "bookcase", "bookshelf", "book rack", "books",
    "rug", "mat", "carpet", "area rug", "runner rug", "door mat",
    "lamp", "table lamp", "floor lamp", "accent lamp", "string light", "fairy light",

    # Cleaning & supplies
    "trash", "garbage", "waste", "recycling", "trash can", "garbage can", "recycling bin",
    "cleaning", "supplies", "mop", "broom", "vacuum", "duster", "sponge",
    "cleaner", "bleach", "disinfectant", "wipes", "paper towel", "towel dispenser",
    "tool", "tools", "toolbox", "hammer", "screwdriver", "wrench", "pliers", "drill",
    "paint", "paintbrush", "paint roller", "paint can",

    # Miscellaneous
    "clothing", "laundry", "clothes", "clothes hanger", "clothesline",
    "sign", "sticker", "label", "flyer",
    "package", "packaging", "wrapping", "cardboard", "packing material",
    "garland", "wreath", "banner", "bunting",
])


# 순서대로 검사하며 첫 매칭 규칙의 사유를 사용한다.
# match: "contains" = 라벨이 키워드를 포함, "exact" = 라벨이 키워드와 동일
CLUTTER_REASON_RULES: Tuple[Mapping, ...] = tuple(MappingProxyType(rule) for rule in (
    {
        "keywords": ("person", "dog", "cat", "bird"),
        "match": "contains",
        "reason": "Buyers focus on the space, not current occupants",
        "category": ItemCategory.OCCUPANT,
    },
    {
        "keywords": ("bottle", "cup", "bowl", "plate", "dish", "glass", "mug", "fork", "knife", "spoon"),
        "match": "contains",
        "reason": "Clear surfaces make kitchens look spacious and clean",
        "category": ItemCategory.MESS,
    },
    {
        "keywords": ("towel", "toothbrush", "soap", "shampoo", "lotion", "makeup", "cosmetics"),
        "match": "contains",
        "reason": "Bathrooms should look spa-like and depersonalized",
        "category": ItemCategory.MESS,
    },
    {
        "keywords": ("pillow", "blanket", "sheet", "clothes", "jacket", "shirt", "pants", "shoes"),
        "match": "contains",
        "reason": "Bedrooms need minimal styling - less is more",
        "category": ItemCategory.MESS,
    },
    {
        "keywords": ("laptop", "phone", "remote", "keyboard", "mouse", "headphones"),
        "match": "contains",
        "reason": "Electronics create visual clutter and distraction",
        "category": ItemCategory.CLUTTER,
    },
    {
        "keywords": ("paper", "magazine", "document", "mail", "trash", "garbage"),
        "match": "contains",
        "reason": "Paper clutter and trash makes spaces look busy and unkempt",
        "category": ItemCategory.MESS,
    },
    {
        "keywords": ("wire", "cable", "cord", "charger"),
        "match": "contains",
        "reason": "Visible cables and wires look messy and unprofessional",
        "category": ItemCategory.MESS,
    },
    {
        "keywords": ("cleaning", "mop", "broom", "vacuum", "tool"),
        "match": "contains",
        "reason": "Cleaning supplies and tools should be hidden away",
        "category": ItemCategory.MESS,
    },
    {
        "keywords": ("toy", "teddy bear", "doll", "game"),
        "match": "contains",
        "reason": "Toys distract from the home's features",
        "category": ItemCategory.CLUTTER,
    },
    {
        "keywords": ("photo", "picture"),
        "match": "contains",
        "reason": "Personal photos should be removed for neutral appeal",
        "category": ItemCategory.PERSONAL,
    },
    {
        "keywords": ("book",),
        "match": "exact",
        "reason": "Too many books create visual clutter - limit to 3-5 styled books",
        "category": ItemCategory.DECOR_EXCESSIVE,
    },
    {
        "keywords": ("candle", "flower", "plant", "bouquet"),
        "match": "contains",
        "reason": "Decor is good, but keep minimal - 1-2 accent pieces per surface",
        "category": ItemCategory.DECOR_CHECK,
    },
    {
        "keywords": ("artwork", "poster", "decoration", "ornament"),
        "match": "contains",
        "reason": "Evaluate if decor is tasteful and minimal - remove if excessive",
        "category": ItemCategory.DECOR_CHECK,
    },
))

DEFAULT_CLUTTER_REASON = "Creates visual clutter - clear for photos"
DEFAULT_CLUTTER_CATEGORY = ItemCategory.CLUTTER


# 인식되지 않은 물건의 방별 버킷 (라벨, 힌트)
UNIDENTIFIED_BUCKETS: Mapping[RoomType, Tuple[str, str]] = MappingProxyType({
    RoomType.KITCHEN: ("Kitchen clutter", "Dishes, bottles, or items on surfaces"),
    RoomType.BATHROOM: ("Bathroom items", "Toiletries, bottles, or personal items"),
    RoomType.BEDROOM: ("Bedroom clutter", "Clothes, items on surfaces, or personal belongings"),
})

DEFAULT_UNIDENTIFIED_BUCKET: Tuple[str, str] = ("Visible clutter", "Remove this object")


# =============================================================================
# Styling Tips
# =============================================================================

STYLING_TIPS: Mapping[RoomType, Mapping] = MappingProxyType({
    RoomType.KITCHEN: MappingProxyType({
        "title": "Kitchen Staging Tips",
        "location": "Kitchen",
        "tips": (
            "Clear ALL countertops - show maximum space",
            "Remove magnets and papers from fridge",
            "Hide dish soap, sponges, cleaning supplies",
            "Put away small appliances",
            "Stage with ONE bowl of fruit or flowers",
            "Close all cabinet doors",
            "Turn on under-cabinet lighting",
        ),
    }),
    RoomType.BATHROOM: MappingProxyType({
        "title": "Bathroom Staging Tips",
        "location": "Bathroom",
        "tips": (
            "Remove ALL toiletries from surfaces",
            "Hide toothbrushes, soap, bottles",
            "Stage with 2-3 white fluffy towels only",
            "Close toilet lid",
            "Close shower curtain neatly",
            "Add ONE small plant or candle",
            "Polish mirrors until spotless",
            "Turn on all lights for spa feel",
        ),
    }),
    RoomType.BEDROOM: MappingProxyType({
        "title": "Bedroom Staging Tips",
        "location": "Bedroom",
        "tips": (
            "Make bed with crisp, neutral linens",
            "Clear nightstands completely",
            "Limit to 4-6 decorative pillows max",
            "Hide ALL clothes and shoes",
            "Close closet doors",
            "Add matching bedside lamps",
            "Keep floor completely clear",
        ),
    }),
    RoomType.LIVING_ROOM: MappingProxyType({
        "title": "Living Room Staging Tips",
        "location": "Living room",
        "tips": (
            "Hide remotes, cables, electronics",
            "Limit throw pillows to 3-4",
            "Clear coffee table except 1-2 items",
            "Remove personal photos",
            "Add fresh flowers or greenery",
            "Use multiple light sources",
            "Show flow and walking space",
        ),
    }),
    RoomType.DINING_ROOM: MappingProxyType({
        "title": "Dining Room Staging Tips",
        "location": "Dining room",
        "tips": (
            "Clear the table except ONE centerpiece",
            "Push all chairs in evenly",
            "Remove high chairs and booster seats",
            "Hide mail, keys, and bags from the table",
            "Keep place settings simple or remove them",
            "Turn on the chandelier or pendant light",
        ),
    }),
    RoomType.GENERAL: MappingProxyType({
        "title": "General Staging Tips",
        "location": "Any room",
        "tips": (
            "Remove ALL personal items and clutter",
            "Clear surfaces - less is more",
            "Maximize natural and artificial light",
            "Add minimal, neutral decor",
            "Create sense of space and flow",
            "Shoot from corners to show room size",
        ),
    }),
})


# =============================================================================
# Helper Functions
# =============================================================================

def get_room_tiers(room_type: RoomType) -> Mapping[str, FrozenSet[str]]:
    """
    방 종류의 키워드 티어를 가져옵니다.

    Args:
        room_type: RoomType

    Returns:
        {"strong": {...}, "medium": {...}, "weak": {...}} (general은 빈 매핑)
    """
    return ROOM_INDICATORS.get(room_type, MappingProxyType({}))


def get_strong_indicators(room_type: RoomType) -> FrozenSet[str]:
    """방 종류의 strong 키워드 세트 (없으면 빈 세트)"""
    return get_room_tiers(room_type).get("strong", frozenset())


def get_priority_classes(room_type: Optional[RoomType] = None) -> Tuple[str, ...]:
    """
    낮은 임계치로 받아들일 클래스 키워드 목록을 반환합니다.

    Args:
        room_type: 방 종류 (None이면 공통 우선순위 클래스만)

    Returns:
        공통 우선순위 클래스 + 방별 클래스
    """
    if room_type is None:
        return PRIORITY_CLASSES
    return PRIORITY_CLASSES + ROOM_PRIORITY_CLASSES.get(room_type, ())


def get_unidentified_bucket(room_type: RoomType) -> Tuple[str, str]:
    """방 종류에 맞는 (버킷 라벨, 힌트) 반환"""
    return UNIDENTIFIED_BUCKETS.get(room_type, DEFAULT_UNIDENTIFIED_BUCKET)


def get_styling_tips(room_type: RoomType) -> Optional[Mapping]:
    """방 종류의 스타일링 팁 항목 (title, location, tips)"""
    return STYLING_TIPS.get(room_type)


def get_all_room_keywords() -> List[str]:
    """
    모든 방 종류/티어의 키워드 목록을 반환합니다.

    Returns:
        중복 없는 정렬된 키워드 리스트
    """
    keywords = set()
    for tiers in ROOM_INDICATORS.values():
        for words in tiers.values():
            keywords.update(words)
    return sorted(keywords)


def describe_rules() -> Dict[str, int]:
    """규칙 테이블 크기 요약 (헬스 체크/로그용)"""
    return {
        "room_types": len(ROOM_INDICATORS),
        "room_keywords": len(get_all_room_keywords()),
        "keep_furniture": len(FURNITURE_KEEP_SET),
        "movable_furniture": len(MOVABLE_FURNITURE_SET),
        "clutter_keywords": len(CLUTTER_VOCABULARY),
        "reason_rules": len(CLUTTER_REASON_RULES),
    }
