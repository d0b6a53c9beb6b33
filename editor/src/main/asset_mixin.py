"""Asset replacement and background removal for CompositionEditor"""

from constants import ASSET_BACKGROUND, ASSET_OVERLAY, ASSET_LOGO, ASSET_SLOTS
from models.composition import OverlayPlacement, LogoPlacement
from models.raster import RasterImage
from services.background_removal import remove_background
from services.background_removal_worker import BackgroundRemovalWorker
from utils.errors import InputError
from utils.logger import loggerWarn


_SLOT_LABELS = {
    ASSET_BACKGROUND: "background",
    ASSET_OVERLAY: "overlay",
    ASSET_LOGO: "logo",
}


class AssetMixin:
    """Background, overlay and logo assets.

    Any failure leaves the live state and history exactly as they were and
    records a user-facing message in last_error.
    """

    def _report_error(self, error, message):
        self.last_error = loggerWarn(error, message)

    def _with_asset(self, state, slot, image, reset_placement):
        state = state.with_asset(slot, image)
        if reset_placement:
            # A new overlay or logo starts from the default placement
            if slot == ASSET_OVERLAY:
                state = state.with_changes(overlay_placement=OverlayPlacement())
            elif slot == ASSET_LOGO:
                state = state.with_changes(logo_placement=LogoPlacement())
        return state

    def replace_asset(self, slot, image, remove_background_tolerance=None, reset_placement=True, description=None):
        """Put an already-fetched raster into a slot and checkpoint it

        Args:
            slot: 'background', 'overlay' or 'logo'
            image: RasterImage, or None to clear the slot
            remove_background_tolerance: when given, key out the image's
                background first with this tolerance
            reset_placement: reset the layer's placement (overlay/logo only)
            description: history description

        Returns:
            bool: True if the edit was applied
        """
        if slot not in ASSET_SLOTS:
            raise ValueError(f"Unknown asset slot: {slot!r}")

        if image is not None and remove_background_tolerance is not None:
            try:
                image = remove_background(image, remove_background_tolerance)
            except InputError as e:
                self._report_error(e, "Failed to remove background.")
                return False

        if description is None:
            label = _SLOT_LABELS[slot]
            description = f"Set {label}" if image is not None else f"Clear {label}"

        self._apply_edit(self._with_asset(self.state, slot, image, reset_placement), description)
        return True

    def set_background(self, image):
        return self.replace_asset(ASSET_BACKGROUND, image)

    def set_overlay(self, image):
        return self.replace_asset(ASSET_OVERLAY, image)

    def set_logo(self, image):
        return self.replace_asset(ASSET_LOGO, image)

    def clear_asset(self, slot):
        return self.replace_asset(slot, None, reset_placement=False)

    def load_asset_from_file(self, slot, path, remove_background_tolerance=None):
        """Read an image file into a slot (upload)"""
        try:
            image = RasterImage.from_file(path)
        except (OSError, InputError) as e:
            self._report_error(e, f"Could not open image: {path}")
            return False

        applied = self.replace_asset(slot, image, remove_background_tolerance)
        if applied:
            self._add_to_recent_files(str(path))
        return applied

    # ========================================
    # Background removal of the current asset
    # ========================================

    def remove_asset_background(self, slot=ASSET_OVERLAY, tolerance=None):
        """Key out the background of the asset currently in a slot

        Placement is kept. Does nothing (returns False) when the slot is empty.
        """
        source = self.state.get_asset(slot)
        if source is None:
            return False
        if tolerance is None:
            tolerance = self.removal_tolerance

        return self.replace_asset(
            slot, source,
            remove_background_tolerance=tolerance,
            reset_placement=False,
            description="Remove background",
        )

    def remove_overlay_background(self, tolerance=None):
        return self.remove_asset_background(ASSET_OVERLAY, tolerance)

    def start_background_removal(self, slot=ASSET_OVERLAY, tolerance=None):
        """Run background removal on a worker thread

        The result is applied when the worker finishes, unless the slot was
        changed in the meantime.

        Returns:
            BackgroundRemovalWorker (not yet started), or None when the slot is empty
        """
        source = self.state.get_asset(slot)
        if source is None:
            return None
        if tolerance is None:
            tolerance = self.removal_tolerance

        worker = BackgroundRemovalWorker(source, tolerance)
        worker.finished_image.connect(lambda image: self._on_background_removed(slot, source, image))
        worker.failed.connect(self._on_background_removal_failed)
        return worker

    def _on_background_removed(self, slot, source, image):
        if self.state.get_asset(slot) is not source:
            return  # stale result, the asset was replaced while processing
        self._apply_edit(self._with_asset(self.state, slot, image, False), "Remove background")

    def _on_background_removal_failed(self, message):
        self.last_error = message
        loggerWarn(RuntimeError(message), message)
