"""Text, template, typography and theme edits for CompositionEditor"""

from models.composition import TemplateType, TextAlign, ColorTheme


class ContentMixin:
    """Edits that checkpoint immediately, plus live text editing"""

    def set_service(self, service_label):
        self._apply_edit(self.state.with_changes(service_label=service_label), "Change service")

    def set_template(self, template):
        if not isinstance(template, TemplateType):
            template = TemplateType.from_name(template)
        self._apply_edit(self.state.with_changes(template=template), f"Template: {template.value}")

    # ========================================
    # Text content
    # ========================================

    def edit_content(self, **fields):
        """Live text edit (per keystroke); commit with commit_content()

        Args:
            **fields: any of headline, body, cta
        """
        content = self.state.content.with_changes(**fields)
        self._set_live_state(self.state.with_changes(content=content))

    def commit_content(self):
        self._save_state("Edit text")

    def set_content(self, content):
        """Replace all text at once and checkpoint"""
        self._apply_edit(self.state.with_changes(content=content), "Set text")

    # ========================================
    # Typography
    # ========================================

    def set_headline_font(self, font):
        self._update_typography("Headline font", headline_font=font)

    def set_body_font(self, font):
        self._update_typography("Body font", body_font=font)

    def set_text_color(self, color):
        self._update_typography("Text color", text_color=color)

    def set_text_align(self, align):
        if not isinstance(align, TextAlign):
            align = TextAlign(align)
        self._update_typography(f"Align {align.value}", text_align=align)

    def _update_typography(self, description, **changes):
        typography = self.state.typography.with_changes(**changes)
        self._apply_edit(self.state.with_changes(typography=typography), description)

    # ========================================
    # Color theme
    # ========================================

    def set_color_theme(self, theme):
        """Apply a theme (ColorTheme or dict), or None to return to template colors"""
        if isinstance(theme, dict):
            theme = ColorTheme.from_dict(theme)
        description = "Reset colors" if theme is None else "Color theme"
        self._apply_edit(self.state.with_changes(color_theme=theme), description)

    def reset_color_theme(self):
        self.set_color_theme(None)
