from .item import BASE_WORTH, UPGRADE_BONUS, Item, create_item, item_worth

__all__ = ["BASE_WORTH", "UPGRADE_BONUS", "Item", "create_item", "item_worth"]
