"""Generated copy, art and themes for CompositionEditor

The generation service itself lives outside the editor. It is handed in as
async callables ("producers") that resolve to text, an image or a theme, or
raise. A resolved result goes into history exactly like a user edit; a
failure is reported and changes nothing.
"""

import asyncio
import random

from constants import SERVICES, AVAILABLE_FONTS, ASSET_BACKGROUND, ASSET_OVERLAY
from models.composition import (
    PostContent, OverlayPlacement, ColorTheme, TemplateType, TextAlign,
)
from models.raster import RasterImage


def _as_content(result):
    if isinstance(result, PostContent):
        return result
    return PostContent(
        headline=result.get('headline', ''),
        body=result.get('body', ''),
        cta=result.get('cta', ''),
    )


def _as_image(result):
    if result is None or isinstance(result, RasterImage):
        return result
    if isinstance(result, (bytes, bytearray)):
        return RasterImage.from_bytes(bytes(result))
    return RasterImage.from_data_url(result)


class GeneratorMixin:
    """Apply results of the external generation service"""

    async def generate_content(self, producer, topic=''):
        """producer(service_label, topic) -> PostContent or {'headline', 'body', 'cta'}"""
        try:
            content = _as_content(await producer(self.state.service_label, topic))
        except Exception as e:
            self._report_error(e, "Failed to generate content. Please try again.")
            return False
        self._apply_edit(self.state.with_changes(content=content), "Generate text")
        return True

    async def generate_background(self, producer, prompt=''):
        """producer(prompt, template_name) -> RasterImage, PNG bytes or data URL"""
        prompt = prompt or f"{self.state.service_label} technology abstract modern"
        try:
            image = _as_image(await producer(prompt, self.state.template.value))
        except Exception as e:
            self._report_error(e, "Failed to generate image.")
            return False
        return self.replace_asset(ASSET_BACKGROUND, image, description="Generate background")

    async def generate_overlay(self, producer, prompt=''):
        """producer(prompt) -> RasterImage, PNG bytes or data URL"""
        prompt = prompt or f"{self.state.service_label} 3d icon illustration"
        try:
            image = _as_image(await producer(prompt))
        except Exception as e:
            self._report_error(e, "Failed to generate element.")
            return False
        return self.replace_asset(ASSET_OVERLAY, image, description="Generate overlay")

    async def generate_theme(self, producer, prompt):
        """producer(prompt) -> {'template': name, 'colors': {...}}

        Sets template and colors and drops any manual text color so the
        theme's text color applies.
        """
        if not prompt:
            return False
        try:
            result = await producer(prompt)
            if result is None:
                return False
            template = TemplateType.from_name(result['template'], default=self.state.template)
            colors = ColorTheme.from_dict(result['colors'])
        except Exception as e:
            self._report_error(e, "Failed to generate theme.")
            return False

        state = self.state.with_changes(
            template=template,
            color_theme=colors,
            typography=self.state.typography.with_changes(text_color=''),
        )
        self._apply_edit(state, "Generate theme")
        return True

    async def recommend_template(self, producer, topic=''):
        """producer(service_label, topic) -> template name"""
        try:
            template = TemplateType.from_name(await producer(self.state.service_label, topic))
        except Exception as e:
            self._report_error(e, "Failed to recommend a template.")
            return False
        self._apply_edit(self.state.with_changes(template=template), f"Template: {template.value}")
        return True

    async def auto_generate(self, text_producer, background_producer, overlay_producer, topic='', rng=None):
        """Randomize the design and regenerate copy and art in parallel

        Service, template, fonts and alignment are picked at random; the
        theme and manual text color are reset. A failed image producer
        leaves that slot empty. A failed text producer aborts the whole
        operation. Success is a single history entry.
        """
        rng = rng or random
        service = rng.choice(SERVICES)
        template = rng.choice(list(TemplateType))
        fonts = [value for _, value in AVAILABLE_FONTS if value]
        headline_font = rng.choice(fonts)
        body_font = rng.choice(fonts)
        align = rng.choice(list(TextAlign))
        self.last_error = None

        content, background, overlay = await asyncio.gather(
            text_producer(service, topic),
            background_producer(f"{service} professional high quality", template.value),
            overlay_producer(f"{service} 3d icon object"),
            return_exceptions=True,
        )

        if isinstance(content, BaseException):
            self._report_error(content, "Auto-generation failed. Please try individual steps.")
            return False

        try:
            content = _as_content(content)
        except Exception as e:
            self._report_error(e, "Auto-generation failed. Please try individual steps.")
            return False

        images = []
        for result in (background, overlay):
            if isinstance(result, BaseException):
                self._report_error(result, "Image generation failed.")
                images.append(None)
                continue
            try:
                images.append(_as_image(result))
            except Exception as e:
                self._report_error(e, "Image generation failed.")
                images.append(None)

        state = self.state.with_changes(
            service_label=service,
            template=template,
            content=content,
            background_asset=images[0],
            overlay_asset=images[1],
            overlay_placement=OverlayPlacement(),
            color_theme=None,
            typography=self.state.typography.with_changes(
                headline_font=headline_font,
                body_font=body_font,
                text_color='',
                text_align=align,
            ),
        )
        # _apply_edit clears last_error; keep an image failure visible
        error = self.last_error
        self._apply_edit(state, "Auto-generate")
        self.last_error = error
        return True
