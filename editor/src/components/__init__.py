"""UI components for Post Composer

This package contains the Qt widgets and their toolkit-independent helpers:
- transform_widgets: drag session state and controller
- layer_widget: draggable overlay/logo layer widget
- canvas_area: preview canvas hosting the layers
"""
