"""
ActionDispatcher - Routes card commands to the robot repository.

Tracks one in-flight action for the whole list. States:

    Idle ──duplicate(id)/delete(id)──▶ Processing(id) ──settled──▶ Idle

A repository failure never escapes the dispatcher: it is logged,
reported through the notifier and the marker is cleared.
"""
from typing import Callable, Optional, TYPE_CHECKING
from PySide6.QtCore import QObject, Signal
from loguru import logger

from robodeck.core.i18n import translate as default_translate

if TYPE_CHECKING:
    from robodeck.core.repository import RobotRepository


Notifier = Callable[[str, str], None]
Confirm = Callable[[str], bool]


def _log_notifier(message: str, kind: str):
    logger.info(f"[{kind}] {message}")


class ActionDispatcher(QObject):
    """
    Duplicate/delete dispatcher with a single processing marker.

    Signals:
        processingChanged(item_id or None)
        itemDuplicated(RobotItem)
        itemDeleted(item_id)
        actionFailed(action, item_id)

    Example:
        dispatcher = ActionDispatcher(repository, notify=toasts.show)
        dispatcher.itemDeleted.connect(viewmodel.remove_item)
        await dispatcher.delete("42", "BTCUSDT Scalper")
    """

    processingChanged = Signal(object)
    itemDuplicated = Signal(object)
    itemDeleted = Signal(str)
    actionFailed = Signal(str, str)

    def __init__(
        self,
        repository: 'RobotRepository',
        notify: Optional[Notifier] = None,
        translate: Callable[..., str] = default_translate,
        confirm: Optional[Confirm] = None,
        parent: QObject | None = None,
    ):
        """
        Initialize dispatcher.

        Args:
            repository: Data collaborator performing the mutations
            notify: Callable(message, kind) used for toasts; kind is
                "success" or "error"
            translate: Label lookup
            confirm: Callable(message) -> bool asked before deleting
        """
        super().__init__(parent)
        self._repository = repository
        self._notify = notify or _log_notifier
        self._translate = translate
        self._confirm = confirm
        self._processing_id: Optional[str] = None

    def set_notifier(self, notify: Optional[Notifier]):
        self._notify = notify or _log_notifier

    def set_confirm(self, confirm: Optional[Confirm]):
        self._confirm = confirm

    # --- State ---

    @property
    def processing_id(self) -> Optional[str]:
        """Id of the item with an in-flight action, or None when idle."""
        return self._processing_id

    @property
    def is_processing(self) -> bool:
        return self._processing_id is not None

    def _busy(self, item_id: str, action: str) -> bool:
        if self._processing_id is None:
            return False
        logger.warning(
            f"Ignoring {action} for {item_id}: {self._processing_id} is still processing"
        )
        return True

    def _begin(self, item_id: str, action: str) -> bool:
        if self._busy(item_id, action):
            return False
        self._processing_id = item_id
        self.processingChanged.emit(item_id)
        return True

    def _settle(self):
        self._processing_id = None
        self.processingChanged.emit(None)

    def _fail(self, action: str, item_id: str, error: Exception, label: str):
        logger.error(f"Failed to {action} robot {item_id}: {error}")
        self._notify(self._translate(label), "error")
        self.actionFailed.emit(action, item_id)

    # --- Actions ---

    async def duplicate(self, item_id: str) -> bool:
        """
        Duplicate a robot.

        Returns:
            True if the repository call succeeded
        """
        if not self._begin(item_id, "duplicate"):
            return False
        try:
            new_item = await self._repository.duplicate(item_id)
        except Exception as e:
            self._fail("duplicate", item_id, e, "dash_toast_duplicate_failed")
            return False
        else:
            if new_item is not None:
                self.itemDuplicated.emit(new_item)
                self._notify(self._translate("dash_toast_duplicate_success"), "success")
            logger.info(f"Duplicated robot {item_id}")
            return True
        finally:
            self._settle()

    async def delete(self, item_id: str, name: str) -> bool:
        """
        Delete a robot after confirmation.

        Returns:
            True if the robot was deleted
        """
        if self._busy(item_id, "delete"):
            return False

        if self._confirm is not None:
            if not self._confirm(self._translate("dash_delete_confirm", name=name)):
                logger.debug(f"Delete of {item_id} cancelled by user")
                return False

        if not self._begin(item_id, "delete"):
            return False
        try:
            await self._repository.delete(item_id)
        except Exception as e:
            self._fail("delete", item_id, e, "dash_toast_delete_failed")
            return False
        else:
            self.itemDeleted.emit(item_id)
            self._notify(self._translate("dash_toast_delete_success"), "success")
            logger.info(f"Deleted robot {item_id} ({name})")
            return True
        finally:
            self._settle()
