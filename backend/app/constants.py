"""Shared constants."""

# New accounts
STARTING_GOLD = 1000
STARTING_LEVEL = 1

# Inventory entries whose item is missing from the catalog
UNKNOWN_ITEM_ICON = "rbxassetid://0"

# Admin record defaults
DEFAULT_ITEM_CATEGORY = "General"
DEFAULT_ITEM_RARITY = "Common"
DEFAULT_CASE_CATEGORY = "General Dentistry"

# Chat validation limits
MAX_MESSAGE_LENGTH = 4000
MAX_CONTEXT_LENGTH = 20000
