"""
Qt Pointer Source - Global pointer events for drag gestures

Feeds POINTER_MOVE / POINTER_RELEASE events (global screen coordinates) into
an EventHub. The Qt event filter is installed on the application only while
at least one subscription is held, so a gesture that ends anywhere on screen
still detaches its listeners and nothing stays installed between gestures.
"""

from PyQt5.QtCore import QObject, QEvent
from PyQt5.QtGui import QMouseEvent
from PyQt5.QtWidgets import QApplication

from cmyk_studio.models.transform import Vec2
from cmyk_studio.utils.event_hub import EventHub, POINTER_MOVE, POINTER_RELEASE


class _PointerFilter(QObject):
	"""Event filter forwarding mouse move/release to the hub"""

	def __init__(self, hub, parent=None):
		super().__init__(parent)
		self.hub = hub

	def eventFilter(self, obj, event):
		etype = event.type()
		if etype in (QEvent.MouseMove, QEvent.MouseButtonRelease) and isinstance(event, QMouseEvent):
			pos = event.globalPos()
			kind = POINTER_MOVE if etype == QEvent.MouseMove else POINTER_RELEASE
			self.hub.emit(kind, Vec2(pos.x(), pos.y()))
		return False


class QtPointerSource(EventHub):
	"""EventHub backed by a Qt event filter

	Args:
		target: QObject to filter (defaults to the QApplication instance)
	"""

	def __init__(self, target=None):
		super().__init__()
		self._target = target
		self._filter = _PointerFilter(self)
		self._installed_on = None

	@property
	def installed(self) -> bool:
		return self._installed_on is not None

	def _on_first_subscription(self):
		target = self._target if self._target is not None else QApplication.instance()
		if target is None:
			return
		target.installEventFilter(self._filter)
		self._installed_on = target

	def _on_last_release(self):
		if self._installed_on is None:
			return
		self._installed_on.removeEventFilter(self._filter)
		self._installed_on = None
