GRID_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE

SYMBOL_X = "X"
SYMBOL_O = "O"

WINDOW_WIDTH = 720
WINDOW_HEIGHT = 480
WINDOW_TITLE = "Tic-Tac-Toe"

# Grid footprint relative to the window; the history column takes the rest.
GRID_MAX_WIDTH_PCT = 0.55
GRID_MAX_HEIGHT_PCT = 0.80
GRID_LEFT_MARGIN = 30
GRID_BOTTOM_MARGIN = 30
MIN_CELL_SIZE = 24
CELL_PADDING = 2

# History column to the right of the grid.
PANEL_GAP = 40
STATUS_HEIGHT = 36
HISTORY_BUTTON_WIDTH = 220
HISTORY_BUTTON_HEIGHT = 28
HISTORY_BUTTON_SPACING = 6
PANEL_TOP_MARGIN = 24

BACKGROUND_COLOR = (245, 245, 245)
CELL_FILL_COLOR = (255, 255, 255)
CELL_OUTLINE_COLOR = (153, 153, 153)
WIN_OUTLINE_COLOR = (40, 160, 70)
MARK_COLORS = {
    SYMBOL_X: (40, 40, 40),
    SYMBOL_O: (40, 40, 40),
}
TEXT_COLOR = (20, 20, 20)
BUTTON_FILL_COLOR = (239, 239, 239)
BUTTON_OUTLINE_COLOR = (118, 118, 118)
CURRENT_MOVE_COLOR = (255, 0, 0)
