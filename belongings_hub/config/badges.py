"""Badge catalogue, award triggers and scoring weights."""

# ============================================================================
# Activity kinds counted towards badges and the good-owner score
# ============================================================================

ACTIVITY_ITEM = "item"
ACTIVITY_SERVICE_HISTORY = "service_history"
ACTIVITY_REVIEW = "review"
ACTIVITY_KINDS = (ACTIVITY_ITEM, ACTIVITY_SERVICE_HISTORY, ACTIVITY_REVIEW)

# ============================================================================
# Catalogue: (name, description, icon, criteria)
# ============================================================================

BADGE_FIRST_ITEM = "First Item Added"
BADGE_ITEM_COLLECTOR = "Item Collector"
BADGE_MAINTENANCE_PRO = "Maintenance Pro"
BADGE_REVIEWER = "Reviewer"

BADGE_CATALOGUE: tuple[tuple[str, str, str, str], ...] = (
    (
        BADGE_FIRST_ITEM,
        "Catalogued your first belonging.",
        "badges/first_item.png",
        "Add one item",
    ),
    (
        BADGE_ITEM_COLLECTOR,
        "Five belongings and counting.",
        "badges/item_collector.png",
        "Add five items",
    ),
    (
        BADGE_MAINTENANCE_PRO,
        "Logged your first service record.",
        "badges/maintenance_pro.png",
        "Add one service history entry",
    ),
    (
        BADGE_REVIEWER,
        "Shared your first technician review.",
        "badges/reviewer.png",
        "Write one review",
    ),
)

# ============================================================================
# Triggers: trigger -> (badge name, activity kind, threshold)
# ============================================================================

TRIGGER_ADD_FIRST_ITEM = "add_first_item"
TRIGGER_ADD_FIVE_ITEMS = "add_five_items"
TRIGGER_ADD_FIRST_SERVICE_HISTORY = "add_first_service_history"
TRIGGER_ADD_FIRST_REVIEW = "add_first_review"

BADGE_TRIGGERS: dict[str, tuple[str, str, int]] = {
    TRIGGER_ADD_FIRST_ITEM: (BADGE_FIRST_ITEM, ACTIVITY_ITEM, 1),
    TRIGGER_ADD_FIVE_ITEMS: (BADGE_ITEM_COLLECTOR, ACTIVITY_ITEM, 5),
    TRIGGER_ADD_FIRST_SERVICE_HISTORY: (BADGE_MAINTENANCE_PRO, ACTIVITY_SERVICE_HISTORY, 1),
    TRIGGER_ADD_FIRST_REVIEW: (BADGE_REVIEWER, ACTIVITY_REVIEW, 1),
}

# ============================================================================
# Good-owner score weights (points per activity)
# ============================================================================

SCORE_WEIGHTS: dict[str, int] = {
    ACTIVITY_ITEM: 10,
    ACTIVITY_SERVICE_HISTORY: 20,
    ACTIVITY_REVIEW: 5,
}

DEFAULT_XP = 0
DEFAULT_LEVEL = 1

__all__ = [
    "ACTIVITY_ITEM",
    "ACTIVITY_SERVICE_HISTORY",
    "ACTIVITY_REVIEW",
    "ACTIVITY_KINDS",
    "BADGE_FIRST_ITEM",
    "BADGE_ITEM_COLLECTOR",
    "BADGE_MAINTENANCE_PRO",
    "BADGE_REVIEWER",
    "BADGE_CATALOGUE",
    "TRIGGER_ADD_FIRST_ITEM",
    "TRIGGER_ADD_FIVE_ITEMS",
    "TRIGGER_ADD_FIRST_SERVICE_HISTORY",
    "TRIGGER_ADD_FIRST_REVIEW",
    "BADGE_TRIGGERS",
    "SCORE_WEIGHTS",
    "DEFAULT_XP",
    "DEFAULT_LEVEL",
]
