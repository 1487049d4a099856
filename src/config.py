FPS = 60
VSYNC = True
WINDOW_TITLE = "Night Banner"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Banner surface
BACKGROUND_COLOR = "#000000"
STAR_COUNT = 100
SHOOTING_STAR_COUNT = 2
# Chance a star is red, then (independently drawn) chance it is blue
STAR_RED_CHANCE = 0.05
STAR_BLUE_CHANCE = 0.15
SHOOTING_STAR_WIDTH = 2

# Planet sits near the bottom-right corner of the surface
PLANET_RADIUS = 100
PLANET_INSET_X = 100
PLANET_INSET_Y = 25
PLANET_INNER_COLOR = "#aa5522"
PLANET_OUTER_COLOR = "#442211"

# Moon orbit model
ORBIT_K = 1000
# Arbitrary speed multiplier on top of the Kepler-like period; tune to taste
MOON_SPEED_FACTOR = 20
# Vertical squash of the orbit to fake an inclined, elliptical perspective
ORBIT_SQUASH = 0.3
MOON_RADIUS_SCALE = 5
MOON_SHADE_AMOUNT = 100
# (mass, orbital radius, color)
MOONS = (
    (10, 150, "#CCCCCC"),
    (5, 200, "#FFD700"),
    (20, 250, "#8A9A5B"),
    (2, 120, "#ADD8E6"),
    (200, 150, "#EEEEEE"),
    (15, 350, "#FF0000"),
)

# Shutter overlay
SHUTTER_SPEED = 10  # pixels per frame
SHUTTER_GRADIENT = ((0.0, "#777777"), (0.5, "#555555"), (1.0, "#333333"))
SHUTTER_STRUT_COLOR = "#444444"
SHUTTER_STRUT_HEIGHT = 20
SHUTTER_STRUT_COUNT = 5
SHUTTER_RIVETS_X = 10
SHUTTER_RIVETS_Y = 6
SHUTTER_RIVET_RADIUS = 4
SHUTTER_RIVET_COLOR = "#222222"
SHUTTER_RIVET_OUTLINE = "#000000"

# Crawler
PLAYER_START = (2, 21)
PLAYER_ICON = "π"
PLAYER_COLOR = "red"
MESSAGE_DURATION_MS = 2000
FONT_NAMES = "dejavusansmono,notomono,couriernew,monospace"
FONT_SIZE = 20
CELL_WIDTH = 14
CELL_HEIGHT = 22
PANEL_WIDTH = 240
PANEL_PADDING = 16
CRAWLER_BACKGROUND = "#101418"
TEXT_COLOR = "#e0e0e0"
WALL_COLOR = "#b0b0b0"
DOOR_COLOR = "#33cc33"
DOOR_ADJACENT_COLOR = "cyan"
MESSAGE_COLOR = "#ffcc66"
BUTTON_COLOR = "#2c3e50"
BUTTON_HOVER_COLOR = "#34495e"
BUTTON_SIZE = (208, 36)
