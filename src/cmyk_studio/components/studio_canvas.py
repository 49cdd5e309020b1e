"""
Studio Canvas - Drop target and pointer surface for placed layers

Provides the canvas widget with:
- Drop handling for parts dragged from the sidebar (decoded drop payloads)
- Pointer press hit-testing that starts move (plain) or rotate (Shift) drags
- Tracking tick entry point that runs the tracking binder against the scene
- Layer list actions (remove, send to back)
- Parenting of error popups to its window while shown

Painting is done elsewhere; this widget only owns geometry and interaction.
Layer positions are canvas pixels relative to the widget center.
"""

import logging

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, pyqtSignal

from cmyk_studio.constants import DROP_PAYLOAD_MIME, LAYER_BASE_SIZE, PAINT_ORDER_TAIL_ON_TOP
from cmyk_studio.models.transform import Vec2
from cmyk_studio.services.drop_payload import decode_drop_payload
from cmyk_studio.services.pointer_controller import PointerTransformController
from cmyk_studio.services.tracking_binder import TrackingBinder
from cmyk_studio.utils import logger as error_reporting
from cmyk_studio.components.pointer_source import QtPointerSource

logger = logging.getLogger(__name__)


class StudioCanvas(QWidget):
	"""Canvas widget binding the scene to drops, pointer drags and tracking"""

	# Signals
	layersChanged = pyqtSignal()  # Emitted after every scene mutation
	layerDropped = pyqtSignal(str)  # Emitted with the new layer id

	def __init__(self, scene, catalog, parent=None, pointer_source=None, tracking_binder=None):
		super().__init__(parent)
		self.scene = scene
		self.catalog = catalog
		self.pointer_source = pointer_source if pointer_source is not None else QtPointerSource()
		self.controller = PointerTransformController(scene, self.pointer_source)
		self.tracking_binder = tracking_binder if tracking_binder is not None else TrackingBinder()

		self.setAcceptDrops(True)
		self.scene.add_listener(self._on_scene_changed)

	# ========================================
	# Geometry
	# ========================================

	def canvas_size(self):
		"""(width, height) in pixels, or None before the widget has a size"""
		if self.width() <= 0 or self.height() <= 0:
			return None
		return (self.width(), self.height())

	def to_canvas_local(self, pos) -> Vec2:
		"""Widget pixel position to center-origin canvas coordinates"""
		return Vec2(pos.x() - self.width() / 2, pos.y() - self.height() / 2)

	def layer_at(self, point: Vec2):
		"""Topmost layer whose artwork box contains a canvas-local point

		Returns:
			PlacedLayer, or None if the point hits nothing
		"""
		layers = self.scene.ordered()
		if PAINT_ORDER_TAIL_ON_TOP:
			layers = reversed(layers)

		for layer in layers:
			half = LAYER_BASE_SIZE * layer.role.render_scale / 2
			if abs(point.x - layer.transform.x) <= half and abs(point.y - layer.transform.y) <= half:
				return layer
		return None

	# ========================================
	# Drag and drop
	# ========================================

	def dragEnterEvent(self, event):
		"""Accept drags carrying a drop payload"""
		if event.mimeData().hasFormat(DROP_PAYLOAD_MIME):
			event.acceptProposedAction()
		else:
			event.ignore()

	def dragMoveEvent(self, event):
		if event.mimeData().hasFormat(DROP_PAYLOAD_MIME):
			event.acceptProposedAction()
		else:
			event.ignore()

	def dropEvent(self, event):
		"""Place the dropped part; malformed payloads are ignored"""
		payload = decode_drop_payload(event.mimeData().text(), self.catalog)
		if payload is None:
			logger.debug("Drop ignored")
			event.ignore()
			return

		layer_id = self.scene.add_layer(payload.role, payload.channel, payload.asset,
										payload.part.default_transform)
		event.acceptProposedAction()
		self.layerDropped.emit(layer_id)

	# ========================================
	# Pointer
	# ========================================

	def mousePressEvent(self, event):
		"""Start a move (plain) or rotate (Shift) drag on the layer under the pointer"""
		if event.button() != Qt.LeftButton:
			super().mousePressEvent(event)
			return

		layer = self.layer_at(self.to_canvas_local(event.pos()))
		if layer is None:
			event.ignore()
			return

		rotate = bool(event.modifiers() & Qt.ShiftModifier)
		global_pos = event.globalPos()
		self.controller.press(layer.id, Vec2(global_pos.x(), global_pos.y()), rotate)
		event.accept()

	def showEvent(self, event):
		# Error popups from loggerRaise are parented to the studio window
		error_reporting.set_main_window(self.window())
		super().showEvent(event)

	def hideEvent(self, event):
		self.controller.cancel()
		if error_reporting.main_window() is self.window():
			error_reporting.set_main_window(None)
		super().hideEvent(event)

	# ========================================
	# Tracking
	# ========================================

	def set_tracking_enabled(self, enabled: bool):
		self.tracking_binder.set_active(enabled)

	def handle_observation(self, observation):
		"""Tracker tick: move tracked layers toward the observed landmarks"""
		return self.tracking_binder.apply(observation, self.scene, self.canvas_size())

	# ========================================
	# Layer list actions
	# ========================================

	def remove_layer(self, layer_id: str):
		if self.controller.state is not None and self.controller.state.layer_id == layer_id:
			self.controller.cancel()
		self.scene.remove_layer(layer_id)

	def send_to_back(self, layer_id: str):
		"""Layer list "Send to back" action: moves the layer to the sequence tail"""
		self.scene.move_to_tail(layer_id)

	def layer_labels(self):
		"""(layer id, label) pairs in scene order for the layer list"""
		return [(layer.id, self.catalog.label_for(layer)) for layer in self.scene.ordered()]

	def _on_scene_changed(self, scene):
		self.layersChanged.emit()
		self.update()
