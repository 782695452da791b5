from postpartum.utilities.config import DATA_DIR

# Centralized paths for the persisted snapshots (single source of truth)
SETTINGS_FILE = DATA_DIR / 'settings.json'
PLAN_FILE = DATA_DIR / 'daily_plan.json'
SHOPPING_LIST_FILE = DATA_DIR / 'shopping_list.json'

__all__ = ['DATA_DIR', 'SETTINGS_FILE', 'PLAN_FILE', 'SHOPPING_LIST_FILE']
