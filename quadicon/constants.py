# this_file: quadicon/constants.py
"""
Geometry, typesetting and tooling constants shared across the icon pipeline.
"""

# Logical canvas (viewBox units) and rendered size (pixels)
CANVAS_SIZE = 100
RENDER_SIZE = 512
QUADRANT_SIZE = CANVAS_SIZE // 2
CANVAS_CENTER = CANVAS_SIZE / 2

# Visual height every glyph string is normalised to
TARGET_HEIGHT = 85

# Horizontal room for the string; three-letter marks get a wider box
AVAILABLE_WIDTH = 85
AVAILABLE_WIDTH_THREE = 94

# Inter-glyph spacing as a fraction of TARGET_HEIGHT (multi-glyph strings only)
INITIAL_SPACING_RATIO = 0.14
MINIMUM_SPACING_RATIO = 0.05

MAX_SHORT_NAME_LENGTH = 3

# Fixed decimals used in emitted transforms
COORDINATE_PRECISION = 3

# Glyph sources report outlines in a 1000 unit em
GLYPH_UNITS_PER_EM = 1000
FONT_NAME = "HelveticaNeue-Bold"

# On-disk helper artefacts owned by the glyph sources
HELPER_DIR = ".quadicon"
SWIFT_TOOL_NAME = "glyph-to-path.swift"
SWIFT_MODULE_CACHE = "swift-module-cache"

# Example app naming
APP_ID_PREFIX = "app.capgo.plugin."
DISPLAY_NAME_SUFFIX = " example app"

# @capacitor/assets backgrounds
ICON_BACKGROUND = "#eeeeee"
ICON_BACKGROUND_DARK = "#222222"
SPLASH_BACKGROUND = "#eeeeee"
SPLASH_BACKGROUND_DARK = "#111111"
