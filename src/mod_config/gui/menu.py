"""
Menu integration for the mod options entry.
"""

import logging
from typing import Callable, Optional

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMenu

ENTRY_OBJECT_NAME = "actionOpenModConfig"
ANCHOR_OBJECT_NAME = "actionOptions"
ENTRY_TEXT = "Mod &Options..."

logger = logging.getLogger(__name__)


def find_action(menu: QMenu, object_name: str) -> Optional[QAction]:
    for action in menu.actions():
        if action.objectName() == object_name:
            return action
    return None


def install_menu_entry(menu: QMenu, callback: Callable[[], object]) -> QAction:
    """
    Add the "Mod Options..." entry to a host menu.

    The entry goes right after the host's own options action when the menu
    has one, otherwise at the end. Installing into a menu that already holds
    the entry returns the existing action.

    Args:
        menu: Host menu to extend
        callback: Called with no arguments when the entry is triggered

    Returns:
        The menu entry action
    """
    existing = find_action(menu, ENTRY_OBJECT_NAME)
    if existing is not None:
        logger.debug("Mod options menu entry already installed")
        return existing

    action = QAction(ENTRY_TEXT, menu)
    action.setObjectName(ENTRY_OBJECT_NAME)
    action.setStatusTip("Configure options of the active mods")
    action.triggered.connect(lambda _checked=False: callback())

    actions = menu.actions()
    anchor = find_action(menu, ANCHOR_OBJECT_NAME)
    if anchor is None:
        menu.addAction(action)
        logger.debug(f"No {ANCHOR_OBJECT_NAME} in menu, appended mod options entry")
        return action

    index = actions.index(anchor)
    if index + 1 < len(actions):
        menu.insertAction(actions[index + 1], action)
    else:
        menu.addAction(action)
    logger.debug(f"Inserted mod options entry after {ANCHOR_OBJECT_NAME}")
    return action
