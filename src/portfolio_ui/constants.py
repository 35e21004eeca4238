WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 640

# Hover debounce, in seconds.
SHOW_DELAY = 0.30
HIDE_DELAY = 0.15

# Distance between the tooltip and its anchor (hotspot edge or cursor).
TOOLTIP_GAP = 15.0
# Viewports narrower than this switch to the bottom sheet layout.
MOBILE_BREAKPOINT = 768
# Distance between the bottom sheet and the bottom edge of the viewport.
SHEET_BOTTOM_OFFSET = 20.0

# Tooltip text metrics used to size the box before it is drawn.
TOOLTIP_PADDING = 12.0
TOOLTIP_LINE_HEIGHT = 18.0
TOOLTIP_TITLE_HEIGHT = 26.0
TOOLTIP_CHAR_WIDTH = 7.0
TOOLTIP_WRAP_CHARS = 42
TOOLTIP_MIN_WIDTH = 200.0
TOOLTIP_TAG_ROW_HEIGHT = 24.0
TOOLTIP_LINK_ROW_HEIGHT = 22.0

# Hotspot grid used by the demo window.
HOTSPOT_WIDTH = 160
HOTSPOT_HEIGHT = 110
HOTSPOT_SPACING = 40
