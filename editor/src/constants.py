"""
Post Composer - Constants and Configuration

This module contains all constant values used throughout the application:
- Logical composition frame and history limits
- Background removal defaults
- Preview zoom bounds
- Slider ranges for layer placement controls
- Service labels, template names and font stacks offered in the UI
"""

# ======================================================================
# COMPOSITION FRAME
# ======================================================================
# All placement values live in a fixed square frame of logical units,
# whatever size the preview is currently rendered at.

LOGICAL_CANVAS_SIZE = 600

# ======================================================================
# HISTORY MANAGEMENT
# ======================================================================

# Maximum undo/redo history
MAX_HISTORY_ENTRIES = 50

# ======================================================================
# BACKGROUND REMOVAL
# ======================================================================

# Euclidean RGB distance below which a pixel is keyed out
DEFAULT_REMOVAL_TOLERANCE = 40

# sqrt(3 * 255^2), distance between black and white
MAX_RGB_DISTANCE = 441.6729559300637

# ======================================================================
# PREVIEW ZOOM
# ======================================================================

ZOOM_MIN = 0.5
ZOOM_MAX = 2.0
ZOOM_STEP = 0.1
ZOOM_DEFAULT = 0.8

# ======================================================================
# UI CONSTRAINTS
# ======================================================================

# Property slider ranges
SLIDER_OVERLAY_SCALE_MIN = 0.1
SLIDER_OVERLAY_SCALE_MAX = 5.0
SLIDER_LOGO_SCALE_MIN = 0.5
SLIDER_LOGO_SCALE_MAX = 3.0
SLIDER_LOGO_RADIUS_MIN = 0
SLIDER_LOGO_RADIUS_MAX = 50
SLIDER_LOGO_BORDER_MIN = 0
SLIDER_LOGO_BORDER_MAX = 20

# ======================================================================
# DEFAULT LAYER SETTINGS
# ======================================================================

DEFAULT_LAYER_SCALE = 1.0
DEFAULT_LAYER_X = 0.0
DEFAULT_LAYER_Y = 0.0
DEFAULT_LOGO_RADIUS = 0.0
DEFAULT_LOGO_BORDER_WIDTH = 0.0
DEFAULT_LOGO_BORDER_COLOR = '#000000'

# Draggable layer identifiers
LAYER_OVERLAY = 'overlay'
LAYER_LOGO = 'logo'

# Asset slots on the composition
ASSET_BACKGROUND = 'background'
ASSET_OVERLAY = 'overlay'
ASSET_LOGO = 'logo'
ASSET_SLOTS = (ASSET_BACKGROUND, ASSET_OVERLAY, ASSET_LOGO)

# ======================================================================
# CATALOG
# ======================================================================

SERVICES = [
    "AI Calling Agent",
    "Game Development",
    "Mobile App Development",
    "Full-Stack Web Development",
    "Cybersecurity Solutions",
    "Robotic Process Automation",
    "Cloud Computing Solutions",
    "Artificial Intelligence & ML Development",
    "Data Analytics & Business Intelligence",
    "Internet of Things (IoT) Development",
    "VR/AR Solutions",
    "Blockchain Development",
    "AI Chatbot Development",
    "UX/UI Design",
    "Business Automation",
]

# (display name, CSS font stack); an empty stack means template default
AVAILABLE_FONTS = [
    ('Default', ''),
    ('Inter (Sans)', "'Inter', sans-serif"),
    ('Poppins (Display)', "'Poppins', sans-serif"),
    ('JetBrains Mono (Code)', "'JetBrains Mono', monospace"),
    ('Playfair Display (Serif)', "'Playfair Display', serif"),
    ('Oswald (Condensed)', "'Oswald', sans-serif"),
    ('Dancing Script (Handwriting)', "'Dancing Script', cursive"),
]

DEFAULT_HEADLINE = "AI Calling Agent"
DEFAULT_BODY = "Revolutionize your customer support with our intelligent AI voice assistants."
DEFAULT_CTA = "Get Started"

# ======================================================================
# CONFIGURATION FILE
# ======================================================================

CONFIG_DIR_NAME = '.post_composer'
CONFIG_FILE_NAME = 'config.json'
MAX_RECENT_FILES = 10
