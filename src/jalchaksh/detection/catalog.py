"""Detection-type profiles and per-type lookup tables."""

from types import MappingProxyType

from jalchaksh.models import Depth, DetectionProfile, Priority, Size, ThreatType

CATALOG: tuple[DetectionProfile, ...] = (
    DetectionProfile(
        type=ThreatType.SUBMARINE,
        priority=Priority.CRITICAL,
        base_confidence=0.85,
        min_size=Size(width=0.15, height=0.08),
        max_size=Size(width=0.4, height=0.2),
        aspect_ratio_range=(2.5, 6.0),
        preferred_depth=Depth.DEEP,
        characteristics=("elongated", "metallic", "large", "horizontal"),
    ),
    DetectionProfile(
        type=ThreatType.MINE,
        priority=Priority.HIGH,
        base_confidence=0.78,
        min_size=Size(width=0.05, height=0.05),
        max_size=Size(width=0.15, height=0.15),
        aspect_ratio_range=(0.8, 1.2),
        preferred_depth=Depth.MEDIUM,
        characteristics=("spherical", "metallic", "anchored"),
    ),
    DetectionProfile(
        type=ThreatType.TORPEDO,
        priority=Priority.CRITICAL,
        base_confidence=0.82,
        min_size=Size(width=0.12, height=0.04),
        max_size=Size(width=0.25, height=0.08),
        aspect_ratio_range=(3.0, 8.0),
        preferred_depth=Depth.ANY,
        characteristics=("cylindrical", "fast-moving", "metallic"),
    ),
    DetectionProfile(
        type=ThreatType.DIVER,
        priority=Priority.MEDIUM,
        base_confidence=0.72,
        min_size=Size(width=0.04, height=0.08),
        max_size=Size(width=0.12, height=0.25),
        aspect_ratio_range=(0.3, 0.8),
        preferred_depth=Depth.SHALLOW,
        characteristics=("humanoid", "vertical", "organic"),
    ),
    DetectionProfile(
        type=ThreatType.DRONE,
        priority=Priority.HIGH,
        base_confidence=0.75,
        min_size=Size(width=0.06, height=0.06),
        max_size=Size(width=0.18, height=0.18),
        aspect_ratio_range=(0.7, 1.5),
        preferred_depth=Depth.SHALLOW,
        characteristics=("compact", "propellers", "hovering"),
    ),
    DetectionProfile(
        type=ThreatType.DEBRIS,
        priority=Priority.LOW,
        base_confidence=0.65,
        min_size=Size(width=0.03, height=0.03),
        max_size=Size(width=0.2, height=0.2),
        aspect_ratio_range=(0.2, 5.0),
        preferred_depth=Depth.ANY,
        characteristics=("irregular", "stationary", "various"),
    ),
)

PROFILES_BY_TYPE = MappingProxyType({p.type: p for p in CATALOG})

# Reference apparent area of each type at 50 m, used for distance estimates.
BASE_SIZES = MappingProxyType(
    {
        ThreatType.SUBMARINE: 0.15,
        ThreatType.TORPEDO: 0.08,
        ThreatType.MINE: 0.06,
        ThreatType.DIVER: 0.05,
        ThreatType.DRONE: 0.04,
        ThreatType.DEBRIS: 0.03,
    }
)
DEFAULT_BASE_SIZE = 0.05

DETECTION_METHODS = MappingProxyType(
    {
        ThreatType.SUBMARINE: "Sonar signature + Visual confirmation",
        ThreatType.TORPEDO: "Motion tracking + Shape analysis",
        ThreatType.MINE: "Magnetic anomaly + Visual pattern",
        ThreatType.DIVER: "Thermal signature + Movement pattern",
        ThreatType.DRONE: "Acoustic signature + Visual tracking",
        ThreatType.DEBRIS: "Visual pattern recognition",
    }
)
DEFAULT_DETECTION_METHOD = "Visual pattern recognition"

# Keyed by plain label: real detectors may report types outside the catalog.
# Torpedo has no icon of its own and uses the default.
THREAT_ICONS = MappingProxyType(
    {
        "submarine": "🚢",
        "mine": "💣",
        "diver": "🤿",
        "drone": "🚁",
        "debris": "🗑️",
        "fish": "🐟",
        "unknown": "❓",
    }
)
DEFAULT_THREAT_ICON = "⚠️"

PRIORITY_COLORS = MappingProxyType(
    {
        Priority.CRITICAL: "#ef4444",
        Priority.HIGH: "#f97316",
        Priority.MEDIUM: "#eab308",
        Priority.LOW: "#3b82f6",
    }
)
DEFAULT_PRIORITY_COLOR = "#eab308"


def get_profile(threat_type: str) -> DetectionProfile | None:
    """Look up a catalog profile by type name; None for unknown labels."""
    return PROFILES_BY_TYPE.get(threat_type)


def priority_for(threat_type: str) -> Priority:
    profile = get_profile(threat_type)
    return profile.priority if profile else Priority.LOW


def base_size(threat_type: str) -> float:
    return BASE_SIZES.get(threat_type, DEFAULT_BASE_SIZE)


def detection_method(threat_type: str) -> str:
    return DETECTION_METHODS.get(threat_type, DEFAULT_DETECTION_METHOD)


def threat_icon(threat_type: str) -> str:
    return THREAT_ICONS.get(threat_type, DEFAULT_THREAT_ICON)


def priority_color(priority: str) -> str:
    return PRIORITY_COLORS.get(priority, DEFAULT_PRIORITY_COLOR)
