"""Configuration management for CompositionEditor"""

import os
import json
import logging

from constants import (
	CONFIG_DIR_NAME, CONFIG_FILE_NAME, MAX_RECENT_FILES,
	ZOOM_DEFAULT, DEFAULT_REMOVAL_TOLERANCE, MAX_RGB_DISTANCE,
)
from utils.coordinate_transforms import clamp_zoom, step_zoom

_logger = logging.getLogger('Config')


def default_config_dir():
	return os.path.join(os.path.expanduser('~'), CONFIG_DIR_NAME)


class ConfigMixin:
	"""Settings file, recent files and preview zoom"""

	def _init_config(self, config_dir=None):
		self.config_dir = config_dir or default_config_dir()
		self.config_file = os.path.join(self.config_dir, CONFIG_FILE_NAME)
		self.max_recent_files = MAX_RECENT_FILES
		self.recent_files = []
		self.zoom_level = ZOOM_DEFAULT
		self.removal_tolerance = DEFAULT_REMOVAL_TOLERANCE
		self._load_config()

	def _load_config(self):
		"""Load recent files and settings from config file"""
		if not os.path.exists(self.config_file):
			return
		try:
			with open(self.config_file, 'r', encoding='utf-8') as f:
				config = json.load(f)
		except (OSError, ValueError) as e:
			_logger.warning("Error loading config %s, using defaults: %s", self.config_file, e)
			return
		if not isinstance(config, dict):
			_logger.warning("Ignoring malformed config %s", self.config_file)
			return

		try:
			self.zoom_level = clamp_zoom(float(config.get('zoom_level', ZOOM_DEFAULT)))
		except (TypeError, ValueError):
			self.zoom_level = ZOOM_DEFAULT
		try:
			tolerance = float(config.get('removal_tolerance', DEFAULT_REMOVAL_TOLERANCE))
			self.removal_tolerance = max(0.0, min(MAX_RGB_DISTANCE, tolerance))
		except (TypeError, ValueError):
			self.removal_tolerance = DEFAULT_REMOVAL_TOLERANCE

		recent = config.get('recent_files', [])
		if not isinstance(recent, list):
			recent = []
		# Filter out files that no longer exist
		self.recent_files = [f for f in recent if isinstance(f, str) and os.path.exists(f)][:self.max_recent_files]

	def _save_config(self):
		"""Save recent files and settings to config file"""
		config = {
			'zoom_level': self.zoom_level,
			'removal_tolerance': self.removal_tolerance,
			'recent_files': self.recent_files[:self.max_recent_files],
		}
		try:
			# Create config directory if it doesn't exist
			os.makedirs(self.config_dir, exist_ok=True)
			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(config, f, indent=2)
		except OSError as e:
			_logger.warning("Error saving config %s: %s", self.config_file, e)

	def _add_to_recent_files(self, filepath):
		"""Add a file to the recent files list"""
		# Remove if already in list
		if filepath in self.recent_files:
			self.recent_files.remove(filepath)

		# Add to front of list
		self.recent_files.insert(0, filepath)

		# Trim to max size
		self.recent_files = self.recent_files[:self.max_recent_files]

		self._save_config()

	def clear_recent_files(self):
		self.recent_files = []
		self._save_config()

	def set_removal_tolerance(self, tolerance):
		self.removal_tolerance = max(0.0, min(MAX_RGB_DISTANCE, tolerance))
		self._save_config()

	# ========================================
	# Preview zoom (view setting, not part of history)
	# ========================================

	def set_zoom(self, zoom_level):
		self.zoom_level = clamp_zoom(zoom_level)
		self._save_config()
		return self.zoom_level

	def zoom_in(self):
		return self.set_zoom(step_zoom(self.zoom_level, 1))

	def zoom_out(self):
		return self.set_zoom(step_zoom(self.zoom_level, -1))
