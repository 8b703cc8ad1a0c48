from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


# ---- Pollution Categories ----

class PollutionCategory(str, Enum):
    PLASTIC = "plastic"
    OIL = "oil"
    DEBRIS = "debris"
    SEWAGE = "sewage"
    FISHING_GEAR = "fishing_gear"
    CONTAINER = "container"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value: object) -> Optional["PollutionCategory"]:
        # Stored payloads use both snake_case and camelCase for fishing gear.
        if isinstance(value, str) and value == "fishingGear":
            return cls.FISHING_GEAR
        return None

    @property
    def display_label(self) -> str:
        return DISPLAY_LABELS[self]


DISPLAY_LABELS: Mapping[PollutionCategory, str] = MappingProxyType({
    PollutionCategory.PLASTIC: "Plastic",
    PollutionCategory.OIL: "Oil",
    PollutionCategory.DEBRIS: "Debris",
    PollutionCategory.SEWAGE: "Sewage",
    PollutionCategory.FISHING_GEAR: "Fishing Gear",
    PollutionCategory.CONTAINER: "Container",
    PollutionCategory.OTHER: "Other",
})


# ---- Weight Estimation (kg per item) ----

DEFAULT_WEIGHT_KG = 0.1

AVERAGE_WEIGHTS_KG: Mapping[PollutionCategory, float] = MappingProxyType({
    PollutionCategory.PLASTIC: 0.025,      # ~25g per bottle/cup
    PollutionCategory.OIL: 0.5,
    PollutionCategory.DEBRIS: 0.15,
    PollutionCategory.SEWAGE: 1.0,
    PollutionCategory.FISHING_GEAR: 2.5,   # net fragment
    PollutionCategory.CONTAINER: 0.5,
    PollutionCategory.OTHER: DEFAULT_WEIGHT_KG,
})


# ---- Fraud Detection ----

MAX_REASONABLE_COUNTS: Mapping[PollutionCategory, int] = MappingProxyType({
    PollutionCategory.PLASTIC: 500,
    PollutionCategory.OIL: 50,
    PollutionCategory.DEBRIS: 1000,
    PollutionCategory.SEWAGE: 20,
    PollutionCategory.FISHING_GEAR: 100,
    PollutionCategory.CONTAINER: 200,
    PollutionCategory.OTHER: 500,
})

FRAUD_FLAG_THRESHOLD = 0.5
INFLATION_RATIO = 3
PER_CATEGORY_INFLATION_RATIO = 2
EMPTY_BASELINE_MIN_ITEMS = 10
SEVERITY_MISMATCH_DELTA = 2

EMPTY_BASELINE_PENALTY = 0.25
INFLATION_PENALTY = 0.4
PER_CATEGORY_INFLATION_PENALTY = 0.2
UNREASONABLE_COUNT_PENALTY = 0.3
SEVERITY_MISMATCH_PENALTY = 0.2
UNBASELINED_CATEGORY_PENALTY = 0.1

# Server-side re-verification of client-submitted scores
CLIENT_XP_INFLATION_RATIO = 1.5
CLIENT_XP_INFLATION_PENALTY = 0.2
WEIGHT_TOLERANCE_KG = 0.001


# ---- XP / Credits ----

BASE_REPORT_XP = 25
PHOTO_BONUS = 5
LOCATION_BONUS = 10
ENVIRONMENT_BONUS = 10
SEVERITY_MULTIPLIER = 5
VARIETY_BONUS = 5
MAX_ITEM_BONUS = 50
MAX_WEIGHT_BONUS = 30
WEIGHT_XP_PER_KG = 3
MIN_PENALIZED_XP = 10

# (min items, bonus), checked top-down; first match wins
VOLUME_TIER_BONUSES = (
    (20, 20),
    (10, 10),
    (5, 5),
)


# ---- Scene Context ----

MARINE_SCENE_TOKENS = ("beach", "water", "ocean")


# ---- Detector Vocabulary ----
# IMPORTANT: OBJECT_TO_CATEGORY must stay in sync with the class list of the
# on-device detector (COCO classes treated as litter). Labels outside the
# table are dropped, never defaulted.

# Label list of the on-device detector (yolo11n, COCO), in model index order.
DETECTOR_CLASSES = (
    "person", "bicycle", "car", "motorcycle", "airplane", "bus", "train", "truck",
    "boat", "traffic light", "fire hydrant", "stop sign", "parking meter", "bench",
    "bird", "cat", "dog", "horse", "sheep", "cow", "elephant", "bear", "zebra",
    "giraffe", "backpack", "umbrella", "handbag", "tie", "suitcase", "frisbee",
    "skis", "snowboard", "sports ball", "kite", "baseball bat", "baseball glove",
    "skateboard", "surfboard", "tennis racket", "bottle", "wine glass", "cup",
    "fork", "knife", "spoon", "bowl", "banana", "apple", "sandwich", "orange",
    "broccoli", "carrot", "hot dog", "pizza", "donut", "cake", "chair", "couch",
    "potted plant", "bed", "dining table", "toilet", "tv", "laptop", "mouse",
    "remote", "keyboard", "cell phone", "microwave", "oven", "toaster", "sink",
    "refrigerator", "book", "clock", "vase", "scissors", "teddy bear",
    "hair drier", "toothbrush",
)

DETECTOR_POLLUTION_CLASSES = frozenset({
    # Containers & packaging
    "bottle", "cup", "bowl", "vase", "wine glass",
    "handbag", "backpack", "suitcase", "umbrella",
    # Sports equipment
    "sports ball", "frisbee", "kite", "surfboard", "skateboard",
    "tennis racket", "baseball bat", "baseball glove",
    # Food waste
    "banana", "apple", "orange", "sandwich", "hot dog",
    "pizza", "donut", "cake", "broccoli", "carrot",
    # Small items & e-waste
    "toothbrush", "book", "cell phone", "remote", "tie", "hair drier",
    # Cutlery
    "fork", "knife", "spoon",
    # Other litter
    "scissors", "teddy bear",
    # Vehicles (dumped/abandoned)
    "bicycle", "car", "motorcycle",
    # Furniture
    "bench",
    # Marine equipment
    "boat",
})

DETECTOR_IGNORED_CLASSES = frozenset({
    "person", "clock", "tv", "laptop", "mouse", "keyboard", "oven",
    "microwave", "refrigerator", "sink", "toilet", "bed", "couch", "chair",
    "dining table", "potted plant",
    # wildlife
    "bird", "cat", "dog",
})

OBJECT_TO_CATEGORY: Mapping[str, PollutionCategory] = MappingProxyType({
    # Plastic (bottles, cups)
    "bottle": PollutionCategory.PLASTIC,
    "cup": PollutionCategory.PLASTIC,
    "toothbrush": PollutionCategory.PLASTIC,

    # General waste (glass, ceramic, bags)
    "bowl": PollutionCategory.DEBRIS,
    "vase": PollutionCategory.DEBRIS,
    "wine glass": PollutionCategory.DEBRIS,
    "handbag": PollutionCategory.DEBRIS,
    "backpack": PollutionCategory.DEBRIS,
    "suitcase": PollutionCategory.DEBRIS,
    "umbrella": PollutionCategory.DEBRIS,

    # Sports equipment
    "sports ball": PollutionCategory.DEBRIS,
    "frisbee": PollutionCategory.DEBRIS,
    "kite": PollutionCategory.DEBRIS,
    "surfboard": PollutionCategory.DEBRIS,
    "skateboard": PollutionCategory.DEBRIS,
    "tennis racket": PollutionCategory.DEBRIS,
    "baseball bat": PollutionCategory.DEBRIS,
    "baseball glove": PollutionCategory.DEBRIS,

    # Food waste
    "banana": PollutionCategory.DEBRIS,
    "apple": PollutionCategory.DEBRIS,
    "orange": PollutionCategory.DEBRIS,
    "sandwich": PollutionCategory.DEBRIS,
    "hot dog": PollutionCategory.DEBRIS,
    "pizza": PollutionCategory.DEBRIS,
    "donut": PollutionCategory.DEBRIS,
    "cake": PollutionCategory.DEBRIS,
    "broccoli": PollutionCategory.DEBRIS,
    "carrot": PollutionCategory.DEBRIS,

    # E-waste & small items
    "cell phone": PollutionCategory.DEBRIS,
    "remote": PollutionCategory.DEBRIS,
    "book": PollutionCategory.DEBRIS,
    "tie": PollutionCategory.DEBRIS,
    "hair drier": PollutionCategory.DEBRIS,

    # Cutlery
    "fork": PollutionCategory.PLASTIC,
    "knife": PollutionCategory.PLASTIC,
    "spoon": PollutionCategory.PLASTIC,

    # Other litter
    "scissors": PollutionCategory.DEBRIS,
    "teddy bear": PollutionCategory.DEBRIS,

    # Vehicles
    "bicycle": PollutionCategory.DEBRIS,
    "car": PollutionCategory.DEBRIS,
    "motorcycle": PollutionCategory.DEBRIS,

    # Furniture
    "bench": PollutionCategory.DEBRIS,

    # Marine equipment
    "boat": PollutionCategory.FISHING_GEAR,
})

PEOPLE_DOMINATED_RATIO = 0.5
PEOPLE_DOMINATED_WARNING = (
    "Too many people in frame - retake the photo focused on the pollution"
)
